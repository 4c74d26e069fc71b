# src/config/settings.py
"""Typed configuration loaded from environment and .env via pydantic-settings.

Every variable is read with the CONLLUKIT_ prefix, e.g.
CONLLUKIT_CHUNK_TARGET_TOKENS=5000. CLI flags override these values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from conllukit.logging.handlers import parse_size


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="CONLLUKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Slicing ===
    chunk_target_tokens: int = 10000
    default_base_name: str = "sliced"
    slice_output_mode: Literal["zip", "files"] = "zip"
    validate_chunks: bool = True

    # === Joining ===
    join_output_name: str = "joined.conllu"
    join_sort_alphabetically: bool = False

    # === Input ===
    input_encoding: str = "utf-8"
    normalize_newlines: bool = False

    # === Output ===
    overwrite: bool = False

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("chunk_target_tokens")
    @classmethod
    def validate_chunk_target(cls, v: int) -> int:
        if v < 1:
            raise ValueError("chunk_target_tokens must be >= 1")
        return v

    @field_validator("log_rotation")
    @classmethod
    def validate_log_rotation(cls, v: str) -> str:
        parse_size(v)
        return v

    @field_validator("log_retention")
    @classmethod
    def validate_log_retention(cls, v: int) -> int:
        if v < 0:
            raise ValueError("log_retention must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if not self.default_base_name.strip():
            errors.append("DEFAULT_BASE_NAME must not be blank")

        if "/" in self.default_base_name or "\\" in self.default_base_name:
            errors.append("DEFAULT_BASE_NAME must not contain path separators")

        if not self.join_output_name.strip():
            errors.append("JOIN_OUTPUT_NAME must not be blank")

        try:
            "".encode(self.input_encoding)
        except LookupError:
            errors.append(f"INPUT_ENCODING {self.input_encoding!r} is not a known codec")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment / .env with optional overrides.

    Args:
        **overrides: Field-level overrides (CLI flags or tests).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
