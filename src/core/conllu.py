# src/core/conllu.py
"""Line-level view of CoNLL-U text.

A CoNLL-U file is read as a sequence of lines, each classified as:
- blank: whitespace only, terminates a sentence block
- comment: starts with '#' once surrounding whitespace is ignored
- token: any other line (one annotated word)

Classification never alters the stored line. Column layout is not checked.
"""

from __future__ import annotations

import re
from typing import Iterable, Literal

LineKind = Literal["blank", "comment", "token"]

LINE_SEPARATOR = "\n"

_FOREIGN_NEWLINE = re.compile(r"\r\n?")

# Byte order mark; str.strip() keeps it, but it is never content
_BOM = "\ufeff"


def classify_line(line: str) -> LineKind:
    """Classify a single line (without its line feed)."""
    stripped = line.strip().strip(_BOM).strip()
    if not stripped:
        return "blank"
    if stripped.startswith("#"):
        return "comment"
    return "token"


def is_token_line(line: str) -> bool:
    return classify_line(line) == "token"


def is_blank_line(line: str) -> bool:
    return classify_line(line) == "blank"


def split_lines(text: str) -> list[str]:
    """Split on line feeds only, keeping every line verbatim.

    Empty text has no lines. A trailing line feed yields a final empty line,
    which keeps `join_lines(split_lines(text)) == text`.
    """
    if not text:
        return []
    return text.split(LINE_SEPARATOR)


def join_lines(lines: Iterable[str]) -> str:
    return LINE_SEPARATOR.join(lines)


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return _FOREIGN_NEWLINE.sub(LINE_SEPARATOR, text)


def count_tokens(lines: Iterable[str]) -> int:
    return sum(1 for line in lines if is_token_line(line))


def count_sentences(lines: Iterable[str]) -> int:
    """Count blank lines; consecutive blanks each count once."""
    return sum(1 for line in lines if is_blank_line(line))
