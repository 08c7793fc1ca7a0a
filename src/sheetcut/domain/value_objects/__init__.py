"""Value objects for the sheet cutting domain.

This module provides immutable data types used throughout the packing
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

from ._geometry import (
    DEFAULT_SHEET_HEIGHT,
    DEFAULT_SHEET_WIDTH,
    CutLine,
    FreeRectangle,
    Instance,
    Piece,
    PlacedPiece,
    Sheet,
)
from ._packing import (
    PackingResult,
    PackingStrategy,
    SortOrder,
    SplitAxis,
    SplitPolicy,
    UtilizationMetrics,
)

__all__ = [
    "DEFAULT_SHEET_HEIGHT",
    "DEFAULT_SHEET_WIDTH",
    "CutLine",
    "FreeRectangle",
    "Instance",
    "PackingResult",
    "PackingStrategy",
    "Piece",
    "PlacedPiece",
    "Sheet",
    "SortOrder",
    "SplitAxis",
    "SplitPolicy",
    "UtilizationMetrics",
]
