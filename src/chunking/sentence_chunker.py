# src/chunking/sentence_chunker.py
"""Sentence-boundary chunking of CoNLL-U text.

Lines are accumulated in order; once the running token count reaches the
target, the chunk is closed at the next blank line. Sentences are never
split, so a chunk may overshoot the target by up to one sentence.
Joining all chunk contents with a line feed restores the input exactly.
"""

from __future__ import annotations

import logging

from conllukit.config.settings import Settings
from conllukit.core.conllu import classify_line, join_lines, split_lines
from conllukit.core.models import ConlluChunk

logger = logging.getLogger(__name__)

CHUNK_SUFFIX = ".conllu"


def chunk_filename(base_name: str, number: int) -> str:
    """Build '{base}.{NNN}.conllu' for a one-based chunk number."""
    return f"{base_name}.{number:03d}{CHUNK_SUFFIX}"


def split_conllu(
    text: str,
    base_name: str,
    target_token_count: int,
) -> list[ConlluChunk]:
    """Split CoNLL-U text into chunks of whole sentences.

    Args:
        text: Full file content, lines separated by '\\n'.
        base_name: Stem for every output filename.
        target_token_count: A chunk is closed at the first blank line after
            its token count reaches this value. Values <= 0 never close a
            chunk early, so the whole input becomes one chunk.

    Returns:
        Chunks in input order. Empty text gives an empty list.
    """
    chunks: list[ConlluChunk] = []
    buffer: list[str] = []
    tokens = 0
    sentences = 0

    def emit() -> None:
        chunks.append(
            ConlluChunk(
                filename=chunk_filename(base_name, len(chunks) + 1),
                position=len(chunks),
                content=join_lines(buffer),
                token_count=tokens,
                sentence_count=sentences,
            )
        )

    for line in split_lines(text):
        buffer.append(line)
        kind = classify_line(line)
        if kind == "token":
            tokens += 1
        elif kind == "blank":
            sentences += 1
            if target_token_count > 0 and tokens >= target_token_count:
                emit()
                buffer = []
                tokens = 0
                sentences = 0

    if buffer:
        emit()

    logger.debug(
        "Split %s into %d chunk(s) (target=%d tokens)",
        base_name, len(chunks), target_token_count,
    )
    return chunks


class SentenceChunker:
    """Settings-bound front end for split_conllu()."""

    def __init__(self, settings: Settings | None = None):
        self._target = 10000 if settings is None else settings.chunk_target_tokens
        self._default_base = "sliced" if settings is None else settings.default_base_name

    def chunk(
        self,
        text: str,
        base_name: str | None = None,
        target_token_count: int | None = None,
    ) -> list[ConlluChunk]:
        """Split text, falling back to the configured base name and target."""
        target = self._target if target_token_count is None else target_token_count
        return split_conllu(text, base_name or self._default_base, target)
