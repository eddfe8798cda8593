"""Pipeline context, stages and chain execution."""

from __future__ import annotations

from .chain import chain
from .context import Consistency, PipelineContext
from .dispatch import DispatchPipeline
from .stages import HALTING_STAGES, Stage

__all__ = [
    "Consistency",
    "DispatchPipeline",
    "HALTING_STAGES",
    "PipelineContext",
    "Stage",
    "chain",
]
