"""Command validation used by ValidationInterceptor."""

from __future__ import annotations

from .composite import CompositeValidator
from .pydantic import PydanticValidator
from .result import ValidationResult

__all__ = [
    "CompositeValidator",
    "PydanticValidator",
    "ValidationResult",
]
