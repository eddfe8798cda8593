"""Dispatch lifecycle stages."""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """Named points in the dispatch lifecycle at which interceptors run."""

    BEFORE_DISPATCH = "before_dispatch"
    AFTER_DISPATCH = "after_dispatch"
    AFTER_FAILURE = "after_failure"


#: Stages whose chain stops as soon as the context is halted.
#: ``AFTER_FAILURE`` is not listed: failure observers run on halted contexts too.
HALTING_STAGES: frozenset[Stage] = frozenset(
    {Stage.BEFORE_DISPATCH, Stage.AFTER_DISPATCH}
)
