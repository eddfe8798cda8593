"""Interceptor registration and built-in interceptors."""

from .correlation import CorrelationInterceptor
from .definition import InterceptorDefinition
from .logging import LoggingInterceptor
from .registry import InterceptorRegistry
from .validation import ValidationInterceptor

__all__ = [
    "CorrelationInterceptor",
    "InterceptorDefinition",
    "InterceptorRegistry",
    "LoggingInterceptor",
    "ValidationInterceptor",
]
