# src/main.py
"""CLI entry point: slice, join, preview commands.

Usage:
    conllukit slice <file> [-n TOKENS] [-o DIR] [--files] [--force]
    conllukit join <file>... [-o OUT] [--sort] [--force]
    conllukit preview <file> [-n TOKENS]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

from conllukit.config.settings import ConfigurationError, Settings, load_settings
from conllukit.core.models import ConlluChunk, format_bytes
from conllukit.logging.logger import setup_logging
from conllukit.storage.base_output_writer import OutputExistsError
from conllukit.storage.reader import ReadError
from conllukit.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = load_settings(**_settings_overrides(args))
    except (ConfigurationError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    try:
        setup_logging(
            level="DEBUG" if args.verbose else settings.log_level,
            log_format=settings.log_format,
            log_file=settings.log_file,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
        )
    except OSError as exc:
        print(f"Cannot open log file: {exc}", file=sys.stderr)
        return 1

    try:
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (ReadError, OutputExistsError) as exc:
        logger.error("%s", exc)
        return 1
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="conllukit",
        description=f"conllukit v{__version__}: slice and join CoNLL-U files",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- slice ---
    p_slice = subparsers.add_parser(
        "slice", help="Split a CoNLL-U file into sentence-aligned chunks",
    )
    p_slice.add_argument("file", type=Path, help="CoNLL-U file to split")
    p_slice.add_argument(
        "-n", "--tokens", type=_positive_int, default=None,
        help="Tokens per chunk target (default: CONLLUKIT_CHUNK_TARGET_TOKENS or 10000)",
    )
    p_slice.add_argument(
        "-o", "--output", type=Path, default=Path("."),
        help="Output directory (default: current directory)",
    )
    p_slice.add_argument(
        "--files", action="store_true",
        help="Write one .conllu file per chunk instead of a ZIP archive",
    )
    p_slice.add_argument(
        "--force", action="store_true",
        help="Overwrite existing outputs",
    )
    p_slice.set_defaults(func=_cmd_slice)

    # --- join ---
    p_join = subparsers.add_parser(
        "join", help="Concatenate CoNLL-U files into one",
    )
    p_join.add_argument("files", type=Path, nargs="+", help="Files to join, in order")
    p_join.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output file (default: joined.conllu)",
    )
    p_join.add_argument(
        "--sort", action="store_true",
        help="Join in alphabetical order of file name",
    )
    p_join.add_argument(
        "--force", action="store_true",
        help="Overwrite an existing output file",
    )
    p_join.set_defaults(func=_cmd_join)

    # --- preview ---
    p_preview = subparsers.add_parser(
        "preview", help="Show the chunks a slice would produce",
    )
    p_preview.add_argument("file", type=Path, help="CoNLL-U file to inspect")
    p_preview.add_argument(
        "-n", "--tokens", type=_positive_int, default=None,
        help="Tokens per chunk target",
    )
    p_preview.set_defaults(func=_cmd_preview)

    return parser


def _settings_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate CLI flags into Settings overrides; unset flags defer to env."""
    overrides: dict[str, Any] = {}
    if getattr(args, "tokens", None) is not None:
        overrides["chunk_target_tokens"] = args.tokens
    if getattr(args, "files", False) is True and args.command == "slice":
        overrides["slice_output_mode"] = "files"
    if getattr(args, "force", False):
        overrides["overwrite"] = True
    return overrides


async def _cmd_slice(args: argparse.Namespace, settings: Settings) -> int:
    """Slice one file into an archive or chunk files."""
    from conllukit.api.facade import slice_file

    file_path: Path = args.file
    if not file_path.is_file():
        logger.error("File not found: %s", file_path)
        return 1

    result = await slice_file(file_path, args.output, settings=settings)
    if result.is_empty:
        print(f"No chunks produced: {file_path} is empty", file=sys.stderr)
        return 1

    _print_chunk_table(result.chunks)
    for written in result.written_paths:
        print(f"Wrote {written}")
    return 0


async def _cmd_join(args: argparse.Namespace, settings: Settings) -> int:
    """Join several files into one."""
    from conllukit.api.facade import join_files

    missing = [p for p in args.files if not p.is_file()]
    if missing:
        for p in missing:
            logger.error("File not found: %s", p)
        return 1

    result = await join_files(
        args.files,
        output_path=args.output,
        sort_alphabetically=args.sort or None,
        settings=settings,
    )
    print("\nJoin complete:")
    print(f"  Files:      {len(result.sources)}")
    print(f"  Tokens:     {result.token_count:,}")
    print(f"  Sentences:  {result.sentence_count:,}")
    print(f"  Size:       {format_bytes(result.byte_size)}")
    print(f"  Output:     {result.output_path}")
    return 0


async def _cmd_preview(args: argparse.Namespace, settings: Settings) -> int:
    """Print the chunk table without writing anything."""
    from conllukit.api.facade import preview
    from conllukit.storage.reader import derive_base_name, read_conllu_text

    file_path: Path = args.file
    if not file_path.is_file():
        logger.error("File not found: %s", file_path)
        return 1

    text = read_conllu_text(
        file_path,
        encoding=settings.input_encoding,
        normalize_newlines=settings.normalize_newlines,
    )
    base_name = derive_base_name(file_path.name, default=settings.default_base_name)
    chunks = preview(text, base_name, settings=settings)
    if not chunks:
        print(f"No chunks produced: {file_path} is empty", file=sys.stderr)
        return 1

    _print_chunk_table(chunks)
    return 0


def _print_chunk_table(chunks: list[ConlluChunk]) -> None:
    """Print filename, tokens, sentences and size per chunk."""
    plural = "" if len(chunks) == 1 else "s"
    width = max(len("Filename"), *(len(c.filename) for c in chunks))
    print(f"\nPreview ({len(chunks)} chunk{plural})")
    print(f"  {'Filename':<{width}}  {'Tokens':>10}  {'Sentences':>10}  {'Size':>10}")
    for c in chunks:
        print(
            f"  {c.filename:<{width}}  {c.token_count:>10,}  "
            f"{c.sentence_count:>10,}  {format_bytes(c.byte_size):>10}"
        )


if __name__ == "__main__":
    sys.exit(main())
