"""PydanticValidator — re-runs pydantic model validation on a command."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult


class PydanticValidator:
    """Validates pydantic commands by re-validating their dumped data.

    Commands built with ``model_construct`` skip validation; this catches
    them before dispatch. Anything that is not a pydantic model is
    considered valid.
    """

    def validate(self, command: Any) -> ValidationResult:
        if not isinstance(command, BaseModel):
            return ValidationResult.success()

        try:
            type(command).model_validate(command.model_dump())
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
                errors.setdefault(loc, []).append(error.get("msg", "invalid"))
            return ValidationResult.failure(errors)
        return ValidationResult.success()
