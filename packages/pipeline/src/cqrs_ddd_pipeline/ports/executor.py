"""IDispatchExecutor — the collaborator that actually executes a command."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..pipeline.context import PipelineContext


@runtime_checkable
class IDispatchExecutor(Protocol):
    """Executes the command carried by a context.

    Implementations read ``command``, ``identity``, ``identity_prefix``,
    ``consistency`` and ``metadata``, perform the dispatch, and return the
    context with its response set via
    :meth:`~cqrs_ddd_pipeline.pipeline.context.PipelineContext.respond`.
    Any exception raised here is treated as a dispatch failure.
    """

    def __call__(self, context: PipelineContext) -> PipelineContext: ...
