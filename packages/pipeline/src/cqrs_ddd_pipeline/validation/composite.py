"""CompositeValidator — runs several validators and collects every error."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.validation import IValidator


class CompositeValidator:
    """Merges the results of all validators instead of failing fast.

    Usage::

        validator = CompositeValidator([PydanticValidator(), QuotaValidator()])
        result = validator.validate(command)
    """

    def __init__(self, validators: Iterable[IValidator] | None = None) -> None:
        self._validators: list[IValidator] = list(validators or [])

    def add(self, validator: IValidator) -> None:
        self._validators.append(validator)

    def validate(self, command: Any) -> ValidationResult:
        combined = ValidationResult.success()
        for validator in self._validators:
            combined = combined.merge(validator.validate(command))
        return combined
