"""cqrs-ddd-pipeline — interceptor pipeline around command dispatch.

A frozen ``PipelineContext`` is threaded through ``before_dispatch`` and
``after_dispatch`` interceptors; any interceptor may halt the chain and fix
the response returned to the caller.
"""

from __future__ import annotations

from .correlation import (
    generate_correlation_id,
    get_causation_id,
    get_context_vars,
    get_correlation_id,
    set_causation_id,
    set_context_vars,
    set_correlation_id,
)

# ── Middleware ───────────────────────────────────────────────────
from .middleware import (
    CorrelationInterceptor,
    InterceptorDefinition,
    InterceptorRegistry,
    LoggingInterceptor,
    ValidationInterceptor,
)

# ── Pipeline ─────────────────────────────────────────────────────
from .pipeline import (
    HALTING_STAGES,
    Consistency,
    DispatchPipeline,
    PipelineContext,
    Stage,
    chain,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import (
    IDispatchExecutor,
    IFailureInterceptor,
    IInterceptor,
    Interceptor,
    IValidator,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    DISPATCH_HALTED,
    HaltedError,
    InterceptorContractError,
    InterceptorRegistrationError,
    InvalidKeyError,
    PipelineError,
    is_halted_response,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import CompositeValidator, PydanticValidator, ValidationResult

__all__: list[str] = [
    # Pipeline
    "Consistency",
    "DispatchPipeline",
    "HALTING_STAGES",
    "PipelineContext",
    "Stage",
    "chain",
    # Ports
    "IDispatchExecutor",
    "IFailureInterceptor",
    "IInterceptor",
    "IValidator",
    "Interceptor",
    # Middleware
    "CorrelationInterceptor",
    "InterceptorDefinition",
    "InterceptorRegistry",
    "LoggingInterceptor",
    "ValidationInterceptor",
    # Correlation
    "generate_correlation_id",
    "get_causation_id",
    "get_context_vars",
    "get_correlation_id",
    "set_causation_id",
    "set_context_vars",
    "set_correlation_id",
    # Validation
    "CompositeValidator",
    "PydanticValidator",
    "ValidationResult",
    # Primitives
    "DISPATCH_HALTED",
    "HaltedError",
    "InterceptorContractError",
    "InterceptorRegistrationError",
    "InvalidKeyError",
    "PipelineError",
    "is_halted_response",
]
