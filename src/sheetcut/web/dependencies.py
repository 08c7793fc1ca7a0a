"""FastAPI dependency injection for cut planning services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from sheetcut.application.commands import ComputeCutPlanCommand


@lru_cache(maxsize=1)
def get_cut_plan_command() -> ComputeCutPlanCommand:
    """Get cached ComputeCutPlanCommand using the full strategy grid."""
    return ComputeCutPlanCommand()


# Type alias for cleaner endpoint signatures
CutPlanCommandDep = Annotated[ComputeCutPlanCommand, Depends(get_cut_plan_command)]
