"""Exceptions for cqrs-ddd-pipeline."""

from __future__ import annotations

from typing import Any, Final


class PipelineError(Exception):
    """Root exception for the pipeline package."""


class HaltedError(PipelineError):
    """Dispatch was vetoed by an interceptor before it reached the executor.

    The core never raises this. A single instance, :data:`DISPATCH_HALTED`,
    is stored as the context response by
    :meth:`~cqrs_ddd_pipeline.pipeline.context.PipelineContext.halt`.
    """


class InvalidKeyError(PipelineError, ValueError):
    """Raised when an ``assigns`` or ``metadata`` key is not a symbolic name.

    Keys must be ``str`` instances that are valid Python identifiers.
    """

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(
            f"Context keys must be identifier strings, got {key!r} "
            f"({type(key).__name__})"
        )


class InterceptorContractError(PipelineError, TypeError):
    """Raised when a stage handler breaks the context contract.

    A handler must return a ``PipelineContext`` and must not un-halt a
    halted one.
    """

    def __init__(self, handler_owner: object, stage: str, reason: str) -> None:
        self.handler_owner = handler_owner
        self.stage = stage
        self.reason = reason
        super().__init__(f"{type(handler_owner).__name__}.{stage} {reason}")


class InterceptorRegistrationError(PipelineError):
    """Raised when an interceptor registration is invalid."""


#: The fixed response produced by ``halt``.
DISPATCH_HALTED: Final[HaltedError] = HaltedError("dispatch halted by middleware")


def is_halted_response(value: Any) -> bool:
    """Return ``True`` if *value* is the halted response."""
    return value is DISPATCH_HALTED
