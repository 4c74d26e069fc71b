# src/storage/base_output_writer.py
"""Abstract output writer interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OutputExistsError(FileExistsError):
    """Raised when an output path exists and overwriting is disabled."""


class BaseOutputWriter(ABC):
    """Unified interface for output storage backends."""

    @abstractmethod
    async def write(self, path: str, content: bytes | str) -> None:
        """Write content to the given path."""

    @abstractmethod
    async def read(self, path: str) -> bytes:
        """Read content from the given path."""

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check if path exists."""

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Remove path if present."""

    async def ensure_writable(self, paths: list[str], overwrite: bool) -> None:
        """Fail before any write if a target already exists.

        Raises:
            OutputExistsError: On the first existing path when overwrite is False.
        """
        if overwrite:
            return
        for path in paths:
            if await self.exists(path):
                raise OutputExistsError(f"Output already exists: {path}")
