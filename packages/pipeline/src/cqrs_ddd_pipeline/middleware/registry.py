"""InterceptorRegistry — declarative registration with ordering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import InterceptorRegistrationError
from .definition import InterceptorDefinition

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.interceptor import IInterceptor

logger = logging.getLogger(__name__)


class InterceptorRegistry:
    """Collects interceptor definitions and produces an ordered list.

    Interceptors are registered with a ``priority``; lower values run
    first in every stage. Equal priorities keep registration order.
    """

    def __init__(self) -> None:
        self._definitions: list[InterceptorDefinition] = []
        self._instances: list[IInterceptor] | None = None  # cache

    # ── Registration ─────────────────────────────────────────────

    def register(
        self,
        interceptor_cls: type[Any],
        *,
        priority: int = 0,
        factory: Callable[..., IInterceptor] | None = None,
        **kwargs: Any,
    ) -> None:
        """Register an interceptor class.

        Parameters
        ----------
        interceptor_cls:
            The interceptor class (must implement ``before_dispatch`` and
            ``after_dispatch``).
        priority:
            Lower = runs earlier.  Default ``0``.
        factory:
            Optional custom constructor.
        **kwargs:
            Passed to the constructor or factory.
        """
        if not isinstance(interceptor_cls, type):
            raise InterceptorRegistrationError(
                f"Expected an interceptor class, got {interceptor_cls!r}"
            )
        self._definitions.append(
            InterceptorDefinition(
                interceptor_cls=interceptor_cls,
                priority=priority,
                factory=factory,
                kwargs=kwargs,
            )
        )
        self._instances = None  # invalidate cache
        logger.debug(
            "Registered interceptor %s (priority=%d)",
            interceptor_cls.__name__,
            priority,
        )

    def add(
        self,
        interceptor_cls: type[Any] | None = None,
        *,
        priority: int = 0,
        factory: Callable[..., IInterceptor] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Decorator-style registration.

        Usage::

            @registry.add
            class AuditInterceptor(Interceptor): ...

            @registry.add(priority=10)
            class LateInterceptor(Interceptor): ...
        """
        if interceptor_cls is None:

            def wrapper(cls: type[Any]) -> type[Any]:
                self.register(cls, priority=priority, factory=factory, **kwargs)
                return cls

            return wrapper

        self.register(interceptor_cls, priority=priority, factory=factory, **kwargs)
        return interceptor_cls

    # ── Retrieval ────────────────────────────────────────────────

    def get_ordered_interceptors(self) -> list[IInterceptor]:
        """Return interceptor instances sorted by priority (ascending)."""
        if self._instances is None:
            ordered = sorted(self._definitions, key=lambda d: d.priority)
            self._instances = [d.build() for d in ordered]
        return list(self._instances)

    def __len__(self) -> int:
        return len(self._definitions)

    def clear(self) -> None:
        """Remove all registrations (testing utility)."""
        self._definitions.clear()
        self._instances = None
