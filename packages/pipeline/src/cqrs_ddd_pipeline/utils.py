"""Common utility functions and helpers."""

from __future__ import annotations

from typing import Any


def default_dict_factory() -> dict[str, Any]:
    """Factory for mutable default dict in model and dataclass fields.

    Use this instead of dict() or {} to avoid default_factory issues.
    """
    return {}
