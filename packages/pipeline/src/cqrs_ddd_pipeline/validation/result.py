"""ValidationResult — field-level validation errors for a command."""

from __future__ import annotations

from dataclasses import dataclass, field


def _no_errors() -> dict[str, list[str]]:
    return {}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one command.

    Usage::

        ValidationResult.success()
        ValidationResult.failure({"name": ["is required"]})
    """

    errors: dict[str, list[str]] = field(default_factory=_no_errors)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors=errors)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine the errors of both results into a new one."""
        merged = {name: list(messages) for name, messages in self.errors.items()}
        for name, messages in other.errors.items():
            merged.setdefault(name, []).extend(messages)
        return ValidationResult(errors=merged)

    def __bool__(self) -> bool:
        return self.is_valid
