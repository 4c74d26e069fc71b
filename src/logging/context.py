# src/logging/context.py
"""Contextual logging support: attach operation and source file to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set per slice/join invocation.
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)
_source: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "source", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    operation: str | None = None
    source: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(operation=_operation.get(), source=_source.get())


def set_operation_context(operation: str, source: str | None = None) -> None:
    """Set the running operation ("slice", "join", ...) and its input."""
    _operation.set(operation)
    _source.set(source)


def clear_context() -> None:
    """Reset all context variables."""
    _operation.set(None)
    _source.set(None)
