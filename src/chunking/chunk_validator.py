# src/chunking/chunk_validator.py
"""Chunk validation ensuring integrity constraints.

Validates:
- Contiguous numbering: positions 0..n-1, filenames {base}.001.conllu onward
- Unique filenames
- Stored counts match the chunk's own lines
- Every chunk but the last ends on a sentence boundary
- Every chunk but the last reaches the token target
- Optionally, that the chunks rejoin into the source text
"""

from __future__ import annotations

from dataclasses import dataclass, field

from conllukit.chunking.sentence_chunker import chunk_filename
from conllukit.core.conllu import (
    count_sentences,
    count_tokens,
    is_blank_line,
    join_lines,
    split_lines,
)
from conllukit.core.models import ConlluChunk


class ChunkValidationError(Exception):
    """Raised when a chunk sequence violates an integrity constraint."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass
class ValidationResult:
    """Result of chunk validation."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def raise_for_errors(self) -> None:
        if not self.valid:
            raise ChunkValidationError(self.errors)


def validate_chunks(
    chunks: list[ConlluChunk],
    base_name: str,
    target_token_count: int,
    source_text: str | None = None,
) -> ValidationResult:
    """Validate a list of chunks for integrity.

    Args:
        chunks: Ordered list of chunks to validate.
        base_name: Stem every filename must use.
        target_token_count: Threshold used when slicing (<= 0 disables the
            threshold check).
        source_text: When given, the chunks must rejoin into exactly this text.

    Returns:
        ValidationResult with errors and warnings.
    """
    result = ValidationResult()

    if not chunks:
        result.warnings.append("Empty chunk list")
        if source_text:
            result.valid = False
            result.errors.append("No chunks produced for non-empty source text")
        return result

    seen_names: set[str] = set()
    last = len(chunks) - 1

    for i, chunk in enumerate(chunks):
        if chunk.filename in seen_names:
            result.valid = False
            result.errors.append(f"Duplicate chunk filename: {chunk.filename}")
        seen_names.add(chunk.filename)

        # Numbering
        if chunk.position != i:
            result.valid = False
            result.errors.append(
                f"Chunk {chunk.filename} position {chunk.position} != index {i}"
            )
        expected_name = chunk_filename(base_name, i + 1)
        if chunk.filename != expected_name:
            result.valid = False
            result.errors.append(
                f"Chunk {i} filename {chunk.filename!r} != {expected_name!r}"
            )

        # Counts
        lines = split_lines(chunk.content) or [""]
        tokens = count_tokens(lines)
        if chunk.token_count != tokens:
            result.valid = False
            result.errors.append(
                f"Chunk {chunk.filename}: token_count {chunk.token_count} != {tokens} token lines"
            )
        sentences = count_sentences(lines)
        if chunk.sentence_count != sentences:
            result.valid = False
            result.errors.append(
                f"Chunk {chunk.filename}: sentence_count {chunk.sentence_count} "
                f"!= {sentences} blank lines"
            )

        if i == last:
            continue

        # Boundary and threshold apply to closed chunks only
        if not is_blank_line(lines[-1]):
            result.valid = False
            result.errors.append(
                f"Chunk {chunk.filename} does not end on a sentence boundary"
            )
        if target_token_count > 0 and chunk.token_count < target_token_count:
            result.valid = False
            result.errors.append(
                f"Chunk {chunk.filename} closed below target: "
                f"{chunk.token_count} < {target_token_count}"
            )

    final = chunks[last]
    if final.token_count == 0 and len(chunks) > 1:
        result.warnings.append(f"Final chunk {final.filename} holds no tokens")

    if source_text is not None and join_lines(c.content for c in chunks) != source_text:
        result.valid = False
        result.errors.append("Chunks do not rejoin into the source text")

    return result
