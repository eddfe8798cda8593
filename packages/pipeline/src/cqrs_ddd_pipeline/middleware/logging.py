"""LoggingInterceptor — logs command dispatch details."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ..ports.interceptor import Interceptor

if TYPE_CHECKING:
    from ..pipeline.context import PipelineContext

_STARTED_AT = "started_at"


class LoggingInterceptor(Interceptor):
    """Logs command dispatch: name, duration, halts and failures."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self._logger = logger or logging.getLogger("cqrs_ddd.middleware")
        self._level = level

    def before_dispatch(self, context: PipelineContext) -> PipelineContext:
        self._logger.log(
            self._level,
            "Dispatching %s (consistency=%s)",
            type(context.command).__name__,
            context.consistency.value,
        )
        return context.assign(_STARTED_AT, time.perf_counter())

    def after_dispatch(self, context: PipelineContext) -> PipelineContext:
        self._logger.log(
            self._level,
            "%s dispatched in %.2fms",
            type(context.command).__name__,
            self._elapsed_ms(context),
        )
        return context

    def after_failure(self, context: PipelineContext) -> PipelineContext:
        self._logger.error(
            "%s failed after %.2fms: %s",
            type(context.command).__name__,
            self._elapsed_ms(context),
            context.assigns.get("error"),
        )
        return context

    @staticmethod
    def _elapsed_ms(context: PipelineContext) -> float:
        started = context.assigns.get(_STARTED_AT)
        if started is None:
            return 0.0
        return (time.perf_counter() - started) * 1000
