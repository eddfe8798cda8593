"""Ports: protocols implemented outside the pipeline core."""

from __future__ import annotations

from .executor import IDispatchExecutor
from .interceptor import IFailureInterceptor, IInterceptor, Interceptor
from .validation import IValidator

__all__ = [
    "IDispatchExecutor",
    "IFailureInterceptor",
    "IInterceptor",
    "IValidator",
    "Interceptor",
]
