# src/core/models.py
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

_SIZE_UNITS = ("Bytes", "KB", "MB")


class ConlluChunk(BaseModel):
    """One output file produced by slicing a CoNLL-U document."""

    # --- Identity ---
    filename: str
    position: int = Field(ge=0, description="Zero-based emission order")

    # --- Content ---
    content: str

    # --- Counts ---
    token_count: int = Field(ge=0)
    sentence_count: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def byte_size(self) -> int:
        """Size of the UTF-8 encoded content."""
        return len(self.content.encode("utf-8"))


def format_bytes(size: int) -> str:
    """Render a byte count for previews, e.g. 1536 -> '1.5 KB'."""
    if size <= 0:
        return "0 Bytes"
    exponent = 0
    while size >= 1024 ** (exponent + 1) and exponent < len(_SIZE_UNITS) - 1:
        exponent += 1
    value = f"{size / 1024**exponent:.2f}".rstrip("0").rstrip(".")
    return f"{value} {_SIZE_UNITS[exponent]}"
