"""Packing strategy enums and result value objects."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ._geometry import CutLine, Instance, PlacedPiece


class SplitPolicy(str, Enum):
    """Rule choosing the cut direction for the L-shaped leftover of a placement."""

    LONGER = "longer"
    SHORTER = "shorter"
    AREA = "area"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class SplitAxis(str, Enum):
    """Direction of the full-length cut made after a placement."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class SortOrder(str, Enum):
    """Descending orderings tried for the instance list."""

    AREA = "area"
    LONGER_SIDE = "longer_side"
    HEIGHT_THEN_WIDTH = "height_then_width"
    WIDTH_THEN_HEIGHT = "width_then_height"
    PERIMETER = "perimeter"


@dataclass(frozen=True)
class PackingStrategy:
    """Search configuration that produced a packing attempt.

    Attributes:
        sort_order: Ordering applied to instances before packing.
        split_policy: Split rule used by the packer.
        transposed: True if the attempt packed the sheet turned a quarter
            turn and was mapped back onto the original orientation.
    """

    sort_order: SortOrder
    split_policy: SplitPolicy
    transposed: bool = False

    def describe(self) -> str:
        orientation = "transposed" if self.transposed else "normal"
        return f"sort={self.sort_order.value}, split={self.split_policy.value}, sheet={orientation}"


@dataclass(frozen=True)
class PackingResult:
    """Outcome of one packing attempt, or the best of a search.

    Attributes:
        placed: Pieces placed on the sheet, in placement order.
        overflow: Instances that found no admissible position.
        cut_lines: Guillotine cuts realizing the layout.
        strategy: Search configuration that produced this result, if known.
    """

    placed: tuple[PlacedPiece, ...] = ()
    overflow: tuple[Instance, ...] = ()
    cut_lines: tuple[CutLine, ...] = ()
    strategy: PackingStrategy | None = None

    @property
    def placed_count(self) -> int:
        return len(self.placed)

    @property
    def overflow_count(self) -> int:
        return len(self.overflow)

    @property
    def used_area(self) -> float:
        """Total area covered by placed pieces."""
        return sum(p.area for p in self.placed)

    @property
    def fits(self) -> bool:
        """True if every requested instance was placed."""
        return not self.overflow

    def transposed(self) -> PackingResult:
        """Map a result packed on a transposed sheet back onto the original.

        Every placement swaps its x/y and flips its rotation flag; every cut
        line swaps its x/y pairs. Overflow has no coordinates and is kept.
        """
        return PackingResult(
            placed=tuple(p.transposed() for p in self.placed),
            overflow=self.overflow,
            cut_lines=tuple(line.transposed() for line in self.cut_lines),
            strategy=self.strategy,
        )

    def with_strategy(self, strategy: PackingStrategy) -> PackingResult:
        return replace(self, strategy=strategy)

    def with_cut_lines(self, cut_lines: tuple[CutLine, ...]) -> PackingResult:
        return replace(self, cut_lines=cut_lines)


@dataclass(frozen=True)
class UtilizationMetrics:
    """Area and count figures derived from a packing result.

    Attributes:
        sheet_area: Total sheet area.
        used_area: Area covered by placed pieces.
        waste_area: Sheet area not covered by any piece.
        waste_percentage: waste_area as a percentage of sheet_area.
        total_pieces: Number of instances requested.
        placed_count: Number of instances placed.
        overflow_count: Number of instances that did not fit.
    """

    sheet_area: float
    used_area: float
    waste_area: float
    waste_percentage: float
    total_pieces: int
    placed_count: int
    overflow_count: int

    @property
    def utilization_percentage(self) -> float:
        return 100.0 - self.waste_percentage

    @property
    def fits(self) -> bool:
        return self.overflow_count == 0

    def exceeds_waste(self, threshold: float) -> bool:
        """True if waste is above the given percentage."""
        return self.waste_percentage > threshold
