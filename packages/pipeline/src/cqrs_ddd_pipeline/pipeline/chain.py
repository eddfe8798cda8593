"""chain — run one stage of the interceptor chain over a context."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.interceptor import IFailureInterceptor
from ..primitives.exceptions import InterceptorContractError
from .context import PipelineContext
from .stages import HALTING_STAGES, Stage

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..ports.interceptor import IInterceptor

logger = logging.getLogger("cqrs_ddd.pipeline")


def _stage_handler(
    interceptor: IInterceptor, stage: Stage
) -> Callable[[PipelineContext], PipelineContext] | None:
    """Return the handler *interceptor* exposes for *stage*, if any."""
    if stage is Stage.BEFORE_DISPATCH:
        return interceptor.before_dispatch
    if stage is Stage.AFTER_DISPATCH:
        return interceptor.after_dispatch
    if stage is Stage.AFTER_FAILURE:
        if isinstance(interceptor, IFailureInterceptor):
            return interceptor.after_failure
        return None
    raise ValueError(f"Unsupported pipeline stage: {stage!r}")


def check_handler_result(
    owner: object,
    stage: str,
    before: PipelineContext,
    after: Any,
) -> PipelineContext:
    """Validate what a stage handler (or executor) handed back."""
    if not isinstance(after, PipelineContext):
        raise InterceptorContractError(
            owner,
            stage,
            f"must return a PipelineContext, got {type(after).__name__}",
        )
    if before.halted and not after.halted:
        raise InterceptorContractError(owner, stage, "must not un-halt the pipeline")
    return after


def chain(
    context: PipelineContext,
    stage: Stage | str,
    interceptors: Iterable[IInterceptor],
) -> PipelineContext:
    """Apply each interceptor's *stage* handler to *context*, in order.

    Interceptors run exactly in the order given. Once the context is halted,
    the remaining interceptors are skipped for ``before_dispatch`` and
    ``after_dispatch``; other stages keep running. Exceptions raised by a
    handler propagate to the caller unchanged.

    Each handler result is checked with :func:`check_handler_result`: a
    handler that returns something other than a ``PipelineContext``, or
    returns an un-halted context from a halted one, raises
    :class:`~cqrs_ddd_pipeline.primitives.exceptions.InterceptorContractError`.
    This is the only pipeline error the chain raises itself; it keeps ``halted``
    monotonic across stages that do not short-circuit.

    Returns the context produced by the last handler that ran.
    """
    stage = Stage(stage)

    for interceptor in interceptors:
        if context.halted and stage in HALTING_STAGES:
            return context

        handler = _stage_handler(interceptor, stage)
        if handler is None:
            continue

        logger.debug("Running %s.%s", type(interceptor).__name__, stage.value)
        result = check_handler_result(
            interceptor, stage.value, context, handler(context)
        )
        if result.halted and not context.halted:
            logger.debug(
                "Pipeline halted by %s during %s",
                type(interceptor).__name__,
                stage.value,
            )
        context = result

    return context
