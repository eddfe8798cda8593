"""IInterceptor — stage-based interceptor protocol."""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from ..pipeline.context import PipelineContext


@runtime_checkable
class IInterceptor(Protocol):
    """Protocol for interceptors in the command dispatch pipeline.

    An interceptor inspects or transforms the
    :class:`~cqrs_ddd_pipeline.pipeline.context.PipelineContext` before and
    after the command is executed, and may halt the chain.
    Both stages must be implemented, even as a pass-through.
    """

    def before_dispatch(self, context: PipelineContext) -> PipelineContext:
        """Run before the command reaches the dispatch executor.

        Parameters
        ----------
        context:
            The current pipeline context.

        Returns
        -------
        The context handed to the next interceptor.
        """
        ...

    def after_dispatch(self, context: PipelineContext) -> PipelineContext:
        """Run after the dispatch executor produced a response."""
        ...


@runtime_checkable
class IFailureInterceptor(Protocol):
    """Optional capability: observe a dispatch whose executor raised.

    The raised exception is available as ``context.assigns["error"]``.
    """

    def after_failure(self, context: PipelineContext) -> PipelineContext: ...


class Interceptor:
    """Convenience base class with pass-through handlers for every stage.

    Subclasses override only the stages they care about::

        class AuditInterceptor(Interceptor):
            def before_dispatch(self, context):
                return context.assign("audited", True)
    """

    def before_dispatch(self, context: PipelineContext) -> PipelineContext:
        return context

    def after_dispatch(self, context: PipelineContext) -> PipelineContext:
        return context

    def after_failure(self, context: PipelineContext) -> PipelineContext:
        return context
