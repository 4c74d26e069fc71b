# src/api/models.py
"""API-level models: SliceResult, JoinResult."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from conllukit.core.models import ConlluChunk


class SliceResult(BaseModel):
    """Return value of facade.slice_file()."""

    source: Path
    base_name: str
    target_token_count: int
    output_mode: Literal["zip", "files"]
    chunks: list[ConlluChunk] = Field(default_factory=list)
    written_paths: list[Path] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when the source produced no chunks and nothing was written."""
        return not self.chunks

    @property
    def total_tokens(self) -> int:
        return sum(c.token_count for c in self.chunks)

    @property
    def total_sentences(self) -> int:
        return sum(c.sentence_count for c in self.chunks)


class JoinResult(BaseModel):
    """Return value of facade.join_files()."""

    output_path: Path
    sources: list[Path]
    token_count: int = 0
    sentence_count: int = 0
    byte_size: int = 0
