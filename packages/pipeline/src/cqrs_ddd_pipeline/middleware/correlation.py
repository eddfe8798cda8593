"""CorrelationInterceptor — stamps correlation ids into event metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..correlation import (
    generate_correlation_id,
    get_causation_id,
    get_correlation_id,
)
from ..ports.interceptor import Interceptor

if TYPE_CHECKING:
    from ..pipeline.context import PipelineContext


class CorrelationInterceptor(Interceptor):
    """Ensures ``correlation_id`` and ``causation_id`` travel with the events.

    The correlation id is taken from the command, then from the current
    context, and generated as a last resort. The causation id is the id of
    the command itself (``command_id``, or ``event_id`` for commands issued
    by event handlers), falling back to the current causation id.

    Both ids are written to ``metadata`` only. The correlation ContextVars
    are read, never set, so no id outlives its own dispatch. Callers that
    want nested dispatches to inherit the ids set them with
    :func:`~cqrs_ddd_pipeline.correlation.set_correlation_id`.
    """

    def __init__(
        self,
        correlation_key: str = "correlation_id",
        causation_key: str = "causation_id",
    ) -> None:
        self._correlation_key = correlation_key
        self._causation_key = causation_key

    def before_dispatch(self, context: PipelineContext) -> PipelineContext:
        command = context.command
        correlation_id = (
            getattr(command, "correlation_id", None)
            or get_correlation_id()
            or generate_correlation_id()
        )
        causation_id = (
            getattr(command, "command_id", None)
            or getattr(command, "event_id", None)
            or get_causation_id()
        )

        context = context.assign_metadata(self._correlation_key, str(correlation_id))
        if causation_id:
            context = context.assign_metadata(self._causation_key, str(causation_id))
        return context

    def after_dispatch(self, context: PipelineContext) -> PipelineContext:
        return context
