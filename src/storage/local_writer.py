# src/storage/local_writer.py
"""Local filesystem output writer (default backend)."""

from __future__ import annotations

from pathlib import Path

from conllukit.storage.base_output_writer import BaseOutputWriter


class LocalWriter(BaseOutputWriter):
    """Write outputs to the local filesystem."""

    def __init__(self, base_path: str | Path | None = None) -> None:
        """Initialize with optional base path.

        Args:
            base_path: Root directory for all writes. If None, paths are used as given.
        """
        self._base = Path(base_path) if base_path else None

    def _resolve(self, path: str) -> Path:
        """Resolve a path relative to base_path."""
        if self._base is not None:
            return self._base / path
        return Path(path)

    async def write(self, path: str, content: bytes | str) -> None:
        """Write content to a local file path.

        Text is written as UTF-8 without newline translation so chunk
        content lands on disk byte for byte.
        """
        p = self._resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        p.write_bytes(content)

    async def read(self, path: str) -> bytes:
        """Read content from a local file path."""
        return self._resolve(path).read_bytes()

    async def exists(self, path: str) -> bool:
        """Check if a local path exists."""
        return self._resolve(path).exists()

    async def delete(self, path: str) -> None:
        """Remove a local file; missing files are ignored."""
        self._resolve(path).unlink(missing_ok=True)
