"""IValidator — command-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for command validators used by
    :class:`~cqrs_ddd_pipeline.middleware.validation.ValidationInterceptor`.
    """

    def validate(self, command: Any) -> ValidationResult:
        """Validate *command* and return a
        :class:`~cqrs_ddd_pipeline.validation.result.ValidationResult`.

        Must return :meth:`ValidationResult.success()` or
        :meth:`ValidationResult.failure(errors)`.
        """
        ...
