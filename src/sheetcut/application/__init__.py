"""Application layer - use cases and orchestration."""

from .commands import ComputeCutPlanCommand, compute_cut_plan
from .dtos import CutPlanOutput, PieceInput, SheetInput

__all__ = [
    "ComputeCutPlanCommand",
    "CutPlanOutput",
    "PieceInput",
    "SheetInput",
    "compute_cut_plan",
]
