"""Tests for DispatchPipeline: stages around the dispatch executor."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from cqrs_ddd_pipeline.middleware.registry import InterceptorRegistry
from cqrs_ddd_pipeline.pipeline.context import Consistency, PipelineContext
from cqrs_ddd_pipeline.pipeline.dispatch import DispatchPipeline
from cqrs_ddd_pipeline.ports.interceptor import Interceptor
from cqrs_ddd_pipeline.primitives.exceptions import (
    DISPATCH_HALTED,
    InterceptorContractError,
)

# --- Test Fixtures ---


class RecordingInterceptor(Interceptor):
    """Records stage calls into a shared journal."""

    def __init__(self, name: str, journal: list[str], *, veto: bool = False) -> None:
        self.name = name
        self.journal = journal
        self.veto = veto

    def before_dispatch(self, context: PipelineContext) -> PipelineContext:
        self.journal.append(f"{self.name}.before")
        return context.halt() if self.veto else context

    def after_dispatch(self, context: PipelineContext) -> PipelineContext:
        self.journal.append(f"{self.name}.after")
        return context

    def after_failure(self, context: PipelineContext) -> PipelineContext:
        self.journal.append(f"{self.name}.failure:{context.assigns['error']}")
        return context


class DepositMoney:
    def __init__(self, account_number: str, amount: int) -> None:
        self.account_number = account_number
        self.amount = amount


class RecordingExecutor:
    """Stands in for the command dispatcher."""

    def __init__(self, journal: list[str]) -> None:
        self.journal = journal
        self.seen: list[PipelineContext] = []

    def __call__(self, context: PipelineContext) -> PipelineContext:
        self.journal.append("execute")
        self.seen.append(context)
        return context.respond({"ok": context.command.amount})


# --- Happy path ---


def test_dispatch_runs_stages_around_executor() -> None:
    journal: list[str] = []
    pipeline = DispatchPipeline(
        [RecordingInterceptor("A", journal), RecordingInterceptor("B", journal)]
    )
    executor = RecordingExecutor(journal)

    result = pipeline.dispatch(
        PipelineContext(command=DepositMoney("ACC1", 10)), executor
    )

    assert journal == ["A.before", "B.before", "execute", "A.after", "B.after"]
    assert result.response == {"ok": 10}
    assert not result.is_halted()


def test_executor_receives_dispatch_fields() -> None:
    executor = RecordingExecutor([])
    ctx = PipelineContext(
        command=DepositMoney("ACC1", 5),
        identity="account_number",
        identity_prefix="bank-",
        consistency=Consistency.STRONG,
        metadata={"user_id": "u-1"},
    )

    DispatchPipeline().dispatch(ctx, executor)

    (seen,) = executor.seen
    assert seen.identity == "account_number"
    assert seen.identity_prefix == "bank-"
    assert seen.consistency is Consistency.STRONG
    assert seen.metadata == {"user_id": "u-1"}


def test_dispatch_without_interceptors_calls_executor() -> None:
    result = DispatchPipeline().dispatch(
        PipelineContext(command=DepositMoney("ACC1", 1)), RecordingExecutor([])
    )

    assert result.response == {"ok": 1}


def test_interceptor_order_is_kept_verbatim() -> None:
    journal: list[str] = []
    interceptors = [RecordingInterceptor(n, journal) for n in ("C", "A", "B")]

    pipeline = DispatchPipeline(interceptors)

    assert list(pipeline.interceptors) == interceptors


def test_pipeline_built_from_registry_order() -> None:
    registry = InterceptorRegistry()
    journal: list[str] = []
    registry.register(RecordingInterceptor, priority=10, name="late", journal=journal)
    registry.register(RecordingInterceptor, priority=0, name="early", journal=journal)

    pipeline = DispatchPipeline(registry.get_ordered_interceptors())
    pipeline.dispatch(
        PipelineContext(command=DepositMoney("ACC1", 1)), RecordingExecutor(journal)
    )

    assert journal == [
        "early.before",
        "late.before",
        "execute",
        "early.after",
        "late.after",
    ]


# --- Halting ---


def test_halt_before_dispatch_skips_executor_and_after_stage() -> None:
    journal: list[str] = []
    pipeline = DispatchPipeline(
        [
            RecordingInterceptor("A", journal),
            RecordingInterceptor("B", journal, veto=True),
            RecordingInterceptor("C", journal),
        ]
    )
    executor = Mock()

    result = pipeline.dispatch(PipelineContext(command=DepositMoney("X", 1)), executor)

    executor.assert_not_called()
    assert journal == ["A.before", "B.before"]
    assert result.is_halted()
    assert result.response is DISPATCH_HALTED


# --- Failures ---


def test_executor_failure_runs_after_failure_and_reraises() -> None:
    journal: list[str] = []
    pipeline = DispatchPipeline(
        [RecordingInterceptor("A", journal), RecordingInterceptor("B", journal)]
    )
    executor = Mock(side_effect=RuntimeError("store unavailable"))

    with pytest.raises(RuntimeError, match="store unavailable"):
        pipeline.dispatch(PipelineContext(command=DepositMoney("X", 1)), executor)

    assert journal == [
        "A.before",
        "B.before",
        "A.failure:store unavailable",
        "B.failure:store unavailable",
    ]


def test_executor_failure_exposes_failure_context() -> None:
    error = RuntimeError("store unavailable")
    executor = Mock(side_effect=error)

    with pytest.raises(RuntimeError) as excinfo:
        DispatchPipeline().dispatch(
            PipelineContext(command=DepositMoney("X", 1)), executor
        )

    failed = excinfo.value.pipeline_context
    assert failed.assigns["error"] is error
    assert failed.response is error
    assert not failed.is_halted()


def test_after_failure_changes_reach_the_caller() -> None:
    class Compensating(Interceptor):
        def after_failure(self, context: PipelineContext) -> PipelineContext:
            return context.assign("compensated", True).halt()

    executor = Mock(side_effect=RuntimeError("store unavailable"))

    with pytest.raises(RuntimeError) as excinfo:
        DispatchPipeline([Compensating()]).dispatch(
            PipelineContext(command=DepositMoney("X", 1)), executor
        )

    failed = excinfo.value.pipeline_context
    assert failed.assigns["compensated"] is True
    assert failed.is_halted()
    assert isinstance(failed.response, RuntimeError)


def test_executor_failure_keeps_earlier_response() -> None:
    class Responding(Interceptor):
        def before_dispatch(self, context: PipelineContext) -> PipelineContext:
            return context.respond("cached")

    executor = Mock(side_effect=RuntimeError("store unavailable"))

    with pytest.raises(RuntimeError) as excinfo:
        DispatchPipeline([Responding()]).dispatch(PipelineContext(), executor)

    assert excinfo.value.pipeline_context.response == "cached"


def test_interceptor_failure_propagates_without_dispatch() -> None:
    class Broken(Interceptor):
        def before_dispatch(self, context: PipelineContext) -> PipelineContext:
            raise KeyError("missing tenant")

    executor = Mock()

    with pytest.raises(KeyError):
        DispatchPipeline([Broken()]).dispatch(PipelineContext(), executor)

    executor.assert_not_called()


def test_executor_must_return_context() -> None:
    executor = Mock(return_value={"ok": True})

    with pytest.raises(InterceptorContractError):
        DispatchPipeline().dispatch(PipelineContext(), executor)
