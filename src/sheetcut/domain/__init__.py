"""Domain layer - sheet packing engine."""

from .services import (
    GuillotinePacker,
    StrategySearch,
    UtilizationReporter,
    choose_split_axis,
    deduplicate_cut_lines,
    expand_pieces,
    find_best_packing,
)
from .value_objects import (
    CutLine,
    FreeRectangle,
    Instance,
    PackingResult,
    PackingStrategy,
    Piece,
    PlacedPiece,
    Sheet,
    SortOrder,
    SplitAxis,
    SplitPolicy,
    UtilizationMetrics,
)

__all__ = [
    "CutLine",
    "FreeRectangle",
    "GuillotinePacker",
    "Instance",
    "PackingResult",
    "PackingStrategy",
    "Piece",
    "PlacedPiece",
    "Sheet",
    "SortOrder",
    "SplitAxis",
    "SplitPolicy",
    "StrategySearch",
    "UtilizationMetrics",
    "UtilizationReporter",
    "choose_split_axis",
    "deduplicate_cut_lines",
    "expand_pieces",
    "find_best_packing",
]
