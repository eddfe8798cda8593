"""DispatchPipeline — wraps an executor with the interceptor stages."""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

from .chain import chain, check_handler_result
from .stages import Stage

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.executor import IDispatchExecutor
    from ..ports.interceptor import IInterceptor
    from .context import PipelineContext

logger = logging.getLogger("cqrs_ddd.pipeline")


class DispatchPipeline:
    """Runs a context through ``before_dispatch``, the executor and then
    ``after_dispatch``.

    * A context halted during ``before_dispatch`` is returned as-is; the
      executor and the later stages never see it.
    * If the executor raises, the exception is stored as
      ``assigns["error"]`` and as the response (unless one is already set),
      the ``after_failure`` stage runs and the exception is re-raised with
      the resulting context attached as ``exc.pipeline_context``.
    * Exceptions from interceptors propagate immediately; no later stage runs.

    Parameters
    ----------
    interceptors:
        Interceptors in execution order, kept verbatim. Pass
        ``registry.get_ordered_interceptors()`` to use an
        :class:`~cqrs_ddd_pipeline.middleware.registry.InterceptorRegistry`.
    """

    def __init__(self, interceptors: Iterable[IInterceptor] = ()) -> None:
        self._interceptors: tuple[IInterceptor, ...] = tuple(interceptors)

    @property
    def interceptors(self) -> tuple[IInterceptor, ...]:
        return self._interceptors

    def dispatch(
        self,
        context: PipelineContext,
        executor: IDispatchExecutor,
    ) -> PipelineContext:
        """Dispatch the command carried by *context* through *executor*."""
        context = chain(context, Stage.BEFORE_DISPATCH, self._interceptors)
        if context.halted:
            logger.info(
                "Dispatch of %s halted before execution",
                type(context.command).__name__,
            )
            return context

        try:
            executed = executor(context)
        except Exception as exc:
            logger.debug(
                "Executor failed for %s: %s", type(context.command).__name__, exc
            )
            failed = chain(
                context.assign("error", exc).respond(exc),
                Stage.AFTER_FAILURE,
                self._interceptors,
            )
            with contextlib.suppress(AttributeError, TypeError):
                exc.pipeline_context = failed  # type: ignore[attr-defined]
            raise

        context = check_handler_result(executor, "__call__", context, executed)
        return chain(context, Stage.AFTER_DISPATCH, self._interceptors)
