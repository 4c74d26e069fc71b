# src/storage/reader.py
"""Read CoNLL-U source files as text and derive output names from them."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from conllukit.core.conllu import normalize_newlines as _normalize

logger = logging.getLogger(__name__)

_EXTENSION = re.compile(r"\.[^/.]+$")

_BOM = "\ufeff"


class ReadError(Exception):
    """Raised when a source file cannot be read or decoded as text."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


def read_conllu_text(
    path: Path,
    encoding: str = "utf-8",
    normalize_newlines: bool = False,
) -> str:
    """Read a whole CoNLL-U file as decoded text.

    A leading byte order mark is dropped so the first line classifies by its
    real content. Line endings are returned untouched unless
    normalize_newlines is set, in which case CRLF and lone CR become LF.

    Raises:
        ReadError: If the file is missing, unreadable or not valid text
            in the given encoding.
    """
    try:
        with path.open("r", encoding=encoding, newline="") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise ReadError(path, f"not valid {encoding} text ({exc.reason})") from exc
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc

    if text.startswith(_BOM):
        text = text[len(_BOM):]

    if normalize_newlines:
        text = _normalize(text)
    logger.debug("Read %s (%d chars)", path, len(text))
    return text


def derive_base_name(filename: str, default: str = "sliced") -> str:
    """Strip the last extension from a file name.

    'corpus.conllu' -> 'corpus', 'a.b.conllu' -> 'a.b'. A name reduced to
    nothing (e.g. '.conllu') falls back to default.
    """
    name = Path(filename).name
    return _EXTENSION.sub("", name) or default
