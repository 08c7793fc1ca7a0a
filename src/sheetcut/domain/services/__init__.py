"""Domain services for sheet packing.

This package provides the packing engine:
- Quantity expansion of requested pieces
- Guillotine packing of one ordered instance list
- Cut line deduplication
- Strategy search over sort orders, split policies and orientations
- Utilization metrics
"""

from .cut_lines import deduplicate_cut_lines
from .guillotine_packer import GuillotinePacker, choose_split_axis
from .piece_expander import expand_pieces
from .strategy_search import (
    SORT_ORDERS,
    SPLIT_POLICIES,
    StrategySearch,
    find_best_packing,
    sort_instances,
)
from .utilization import UtilizationReporter

__all__ = [
    "SORT_ORDERS",
    "SPLIT_POLICIES",
    "GuillotinePacker",
    "StrategySearch",
    "UtilizationReporter",
    "choose_split_axis",
    "deduplicate_cut_lines",
    "expand_pieces",
    "find_best_packing",
    "sort_instances",
]
