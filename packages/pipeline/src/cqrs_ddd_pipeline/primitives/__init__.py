"""Primitives: exceptions and the halted response."""

from __future__ import annotations

from .exceptions import (
    DISPATCH_HALTED,
    HaltedError,
    InterceptorContractError,
    InterceptorRegistrationError,
    InvalidKeyError,
    PipelineError,
    is_halted_response,
)

__all__ = [
    "DISPATCH_HALTED",
    "HaltedError",
    "InterceptorContractError",
    "InterceptorRegistrationError",
    "InvalidKeyError",
    "PipelineError",
    "is_halted_response",
]
