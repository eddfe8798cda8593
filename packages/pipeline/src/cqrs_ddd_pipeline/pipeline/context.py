"""PipelineContext — the per-dispatch value threaded through interceptors."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..primitives.exceptions import DISPATCH_HALTED, InvalidKeyError
from ..utils import default_dict_factory


class Consistency(str, Enum):
    """Requested read-after-write consistency for a dispatch."""

    EVENTUAL = "eventual"
    STRONG = "strong"


def _check_key(key: object) -> str:
    if not isinstance(key, str) or not key.isidentifier():
        raise InvalidKeyError(key)
    return key


class PipelineContext(BaseModel):
    """
    Carries a single command through the interceptor chain.

    The model is frozen: every operation returns a new context and leaves
    the receiver untouched, so an interceptor never shares mutable state
    with the invocation that ran before it.

    Fields:
    - ``assigns``: scratch storage shared by the caller and interceptors
    - ``command``: the command being dispatched (never inspected here)
    - ``consistency``: requested dispatch consistency, eventual by default
    - ``identity``: a command field name, or a one-argument callable that
      returns the aggregate identity from the command
    - ``identity_prefix``: optional prefix for the resolved identity
    - ``metadata``: persisted alongside the resulting events
    - ``halted``: whether an interceptor stopped the chain
    - ``response``: what the dispatch caller gets back, ``None`` until set

    Keys written through :meth:`assign` and :meth:`assign_metadata` must be
    identifier strings; anything else raises
    :class:`~cqrs_ddd_pipeline.primitives.exceptions.InvalidKeyError`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    assigns: dict[str, Any] = Field(default_factory=default_dict_factory)
    command: Any = None
    consistency: Consistency = Consistency.EVENTUAL
    identity: str | Callable[[Any], Any] | None = None
    identity_prefix: str | None = None
    metadata: dict[str, Any] = Field(default_factory=default_dict_factory)
    halted: bool = False
    response: Any = None

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_defaults_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @model_validator(mode="after")
    def _halted_requires_response(self) -> PipelineContext:
        if self.halted and self.response is None:
            raise ValueError("a halted context must carry a response")
        return self

    def _copy(self, **update: Any) -> PipelineContext:
        update.setdefault("assigns", dict(self.assigns))
        update.setdefault("metadata", dict(self.metadata))
        return self.model_copy(update=update)

    # ── Scratch storage ──────────────────────────────────────────

    def assign(self, key: str, value: Any) -> PipelineContext:
        """Return a copy with ``assigns[key] = value``."""
        assigns = dict(self.assigns)
        assigns[_check_key(key)] = value
        return self._copy(assigns=assigns)

    def assign_metadata(self, key: str, value: Any) -> PipelineContext:
        """Return a copy with ``metadata[key] = value``."""
        metadata = dict(self.metadata)
        metadata[_check_key(key)] = value
        return self._copy(metadata=metadata)

    # ── Halting ──────────────────────────────────────────────────

    def is_halted(self) -> bool:
        return self.halted

    def halt(self) -> PipelineContext:
        """Stop downstream interceptors and respond with the halted error.

        Halting during ``before_dispatch`` prevents the command from being
        dispatched. A response that was already set is kept.
        """
        return self._copy(halted=True).respond(DISPATCH_HALTED)

    # ── Response ─────────────────────────────────────────────────

    def respond(self, response: Any) -> PipelineContext:
        """Set the response returned to the caller, unless already set."""
        if self.response is not None:
            return self
        return self._copy(response=response)
