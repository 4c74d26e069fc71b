# src/api/facade.py
"""Public API facade: preview, slice and join CoNLL-U files.

Usage:
    from conllukit.api.facade import slice_file, join_files
    result = await slice_file(Path("corpus.conllu"), Path("out"))
    joined = await join_files([Path("a.conllu"), Path("b.conllu")], Path("all.conllu"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from conllukit.api.models import JoinResult, SliceResult
from conllukit.chunking.chunk_validator import validate_chunks
from conllukit.chunking.sentence_chunker import SentenceChunker
from conllukit.config.settings import Settings
from conllukit.core.conllu import count_sentences, count_tokens, split_lines
from conllukit.core.models import ConlluChunk
from conllukit.joining.joiner import join_texts, order_sources
from conllukit.logging.context import clear_context, set_operation_context
from conllukit.storage.archive import archive_name, build_archive
from conllukit.storage.base_output_writer import BaseOutputWriter
from conllukit.storage.local_writer import LocalWriter
from conllukit.storage.reader import derive_base_name, read_conllu_text

logger = logging.getLogger(__name__)


def preview(
    text: str,
    base_name: str,
    target_token_count: int | None = None,
    settings: Settings | None = None,
) -> list[ConlluChunk]:
    """Compute the chunks a slice would produce, without touching disk.

    Cheap enough to call on every change of input or target size.
    """
    return SentenceChunker(settings).chunk(text, base_name, target_token_count)


async def slice_file(
    path: Path,
    output_dir: Path,
    target_token_count: int | None = None,
    settings: Settings | None = None,
    writer: BaseOutputWriter | None = None,
) -> SliceResult:
    """Slice a CoNLL-U file and persist the chunks.

    Steps:
      1. Read and decode the source file
      2. Split it into sentence-aligned chunks
      3. Validate the chunks against the source
      4. Write one ZIP archive or one file per chunk into output_dir

    Args:
        path: Source CoNLL-U file.
        output_dir: Directory receiving the archive or chunk files.
        target_token_count: Tokens per chunk. Defaults to settings.
        settings: Global settings. Loaded from environment if None.
        writer: Output backend. LocalWriter if None.

    Returns:
        SliceResult. When the source is empty, chunks and written_paths are
        empty and nothing is written.

    Raises:
        ReadError: Source cannot be read as text.
        ChunkValidationError: Chunks violate an integrity constraint.
        OutputExistsError: A target exists and overwrite is disabled.
    """
    settings = settings or Settings()
    writer = writer or LocalWriter()
    target = settings.chunk_target_tokens if target_token_count is None else target_token_count

    set_operation_context("slice", path.name)
    try:
        text = read_conllu_text(
            path,
            encoding=settings.input_encoding,
            normalize_newlines=settings.normalize_newlines,
        )
        base_name = derive_base_name(path.name, default=settings.default_base_name)
        chunks = SentenceChunker(settings).chunk(text, base_name, target)

        result = SliceResult(
            source=path,
            base_name=base_name,
            target_token_count=target,
            output_mode=settings.slice_output_mode,
            chunks=chunks,
        )
        if not chunks:
            logger.warning("No chunks produced from %s (empty input)", path)
            return result

        if settings.validate_chunks:
            validation = validate_chunks(chunks, base_name, target, source_text=text)
            for warning in validation.warnings:
                logger.warning("Chunk validation: %s", warning)
            validation.raise_for_errors()

        outputs = _render_outputs(chunks, base_name, output_dir, settings.slice_output_mode)
        await writer.ensure_writable(list(outputs), settings.overwrite)
        await _write_all(writer, outputs)

        result.written_paths = [Path(p) for p in outputs]
        logger.info(
            "Sliced %s into %d chunk(s): %d tokens, %d sentences",
            path.name, len(chunks), result.total_tokens, result.total_sentences,
        )
        return result
    finally:
        clear_context()


async def join_files(
    paths: Sequence[Path],
    output_path: Path | None = None,
    sort_alphabetically: bool | None = None,
    settings: Settings | None = None,
    writer: BaseOutputWriter | None = None,
) -> JoinResult:
    """Concatenate CoNLL-U files into one.

    Args:
        paths: Source files, in join order unless sorted.
        output_path: Destination file. Defaults to settings.join_output_name.
        sort_alphabetically: Order sources by file name. Defaults to settings.
        settings: Global settings. Loaded from environment if None.
        writer: Output backend. LocalWriter if None.

    Raises:
        ValueError: If no source files are given.
        ReadError: A source cannot be read as text.
        OutputExistsError: Destination exists and overwrite is disabled.
    """
    if not paths:
        raise ValueError("join_files() needs at least one input file")

    settings = settings or Settings()
    writer = writer or LocalWriter()
    output_path = output_path or Path(settings.join_output_name)
    if sort_alphabetically is None:
        sort_alphabetically = settings.join_sort_alphabetically

    set_operation_context("join", output_path.name)
    try:
        ordered = order_sources(paths, sort_alphabetically=sort_alphabetically)
        # Check the destination before reading so a refused join costs nothing
        await writer.ensure_writable([str(output_path)], settings.overwrite)

        texts = [
            read_conllu_text(
                p,
                encoding=settings.input_encoding,
                normalize_newlines=settings.normalize_newlines,
            )
            for p in ordered
        ]
        joined = join_texts(texts)
        await writer.write(str(output_path), joined)

        lines = split_lines(joined)
        result = JoinResult(
            output_path=output_path,
            sources=ordered,
            token_count=count_tokens(lines),
            sentence_count=count_sentences(lines),
            byte_size=len(joined.encode("utf-8")),
        )
        logger.info(
            "Joined %d file(s) into %s: %d tokens, %d sentences",
            len(ordered), output_path, result.token_count, result.sentence_count,
        )
        return result
    finally:
        clear_context()


def _render_outputs(
    chunks: list[ConlluChunk],
    base_name: str,
    output_dir: Path,
    mode: str,
) -> dict[str, bytes | str]:
    """Map output path -> payload for the chosen output mode."""
    if mode == "zip":
        return {str(output_dir / archive_name(base_name)): build_archive(chunks)}
    return {str(output_dir / c.filename): c.content for c in chunks}


async def _write_all(writer: BaseOutputWriter, outputs: dict[str, bytes | str]) -> None:
    """Write every output, removing those already touched if one write fails."""
    attempted: list[str] = []
    try:
        for out_path, payload in outputs.items():
            attempted.append(out_path)
            await writer.write(out_path, payload)
    except Exception:
        logger.error("Write failed, removing %d partial output(s)", len(attempted))
        for out_path in attempted:
            await writer.delete(out_path)
        raise
