"""InterceptorDefinition — descriptor for an interceptor in the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..utils import default_dict_factory

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.interceptor import IInterceptor


@dataclass
class InterceptorDefinition:
    """Descriptor for an interceptor in the pipeline.

    Supports **deferred instantiation**: supply *interceptor_cls* and
    optional *factory* for lazy construction.
    """

    interceptor_cls: type[Any]
    priority: int = 0
    factory: Callable[..., IInterceptor] | None = None
    kwargs: dict[str, Any] = field(default_factory=default_dict_factory)

    def build(self) -> IInterceptor:
        """Construct the interceptor instance."""
        if self.factory is not None:
            return self.factory(**self.kwargs)
        instance: IInterceptor = self.interceptor_cls(**self.kwargs)
        return instance
