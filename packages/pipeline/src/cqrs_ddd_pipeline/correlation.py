"""Correlation and causation ids carried across dispatches."""

from __future__ import annotations

import uuid
from contextvars import ContextVar

# ContextVar so concurrent dispatches in other tasks or threads keep their own ids.
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)
_causation_id: ContextVar[str | None] = ContextVar("causation_id", default=None)


def get_correlation_id() -> str | None:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


def get_causation_id() -> str | None:
    """Get current causation ID from context."""
    return _causation_id.get()


def set_causation_id(causation_id: str | None) -> None:
    """Set causation ID in context."""
    _causation_id.set(causation_id)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def get_context_vars() -> dict[str, str | None]:
    """Snapshot both ids, e.g. to hand them to a background task."""
    return {
        "correlation_id": get_correlation_id(),
        "causation_id": get_causation_id(),
    }


def set_context_vars(**kwargs: str | None) -> None:
    """Restore ids captured with :func:`get_context_vars`."""
    if "correlation_id" in kwargs:
        set_correlation_id(kwargs["correlation_id"])
    if "causation_id" in kwargs:
        set_causation_id(kwargs["causation_id"])
