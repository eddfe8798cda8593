"""ValidationInterceptor — halts dispatch of invalid commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..ports.interceptor import Interceptor

if TYPE_CHECKING:
    from ..pipeline.context import PipelineContext
    from ..ports.validation import IValidator

logger = logging.getLogger("cqrs_ddd.middleware")


class ValidationInterceptor(Interceptor):
    """Runs ``IValidator.validate()`` before dispatch.

    If validation fails, the errors are stored as
    ``assigns["validation_errors"]`` and the pipeline is halted, so the
    caller receives the halted response.
    """

    def __init__(self, validator: IValidator) -> None:
        self._validator = validator

    def before_dispatch(self, context: PipelineContext) -> PipelineContext:
        result = self._validator.validate(context.command)
        if result.is_valid:
            return context
        logger.info(
            "%s rejected by validation: %s",
            type(context.command).__name__,
            result.errors,
        )
        return context.assign("validation_errors", result.errors).halt()

    def after_dispatch(self, context: PipelineContext) -> PipelineContext:
        return context
