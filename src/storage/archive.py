# src/storage/archive.py
"""ZIP packaging of sliced chunks."""

from __future__ import annotations

import io
import zipfile
from typing import Sequence

from conllukit.core.models import ConlluChunk


class ArchiveError(Exception):
    """Raised when an archive cannot be built from the given chunks."""


def archive_name(base_name: str) -> str:
    return f"{base_name}.zip"


def build_archive(chunks: Sequence[ConlluChunk]) -> bytes:
    """Pack chunks into an in-memory ZIP, one entry per chunk, in order.

    Raises:
        ArchiveError: If chunks is empty or filenames collide.
    """
    if not chunks:
        raise ArchiveError("Cannot build an archive without chunks")

    names = [c.filename for c in chunks]
    if len(set(names)) != len(names):
        raise ArchiveError("Duplicate chunk filenames in archive")

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for chunk in chunks:
            zf.writestr(chunk.filename, chunk.content.encode("utf-8"))
    return buffer.getvalue()

