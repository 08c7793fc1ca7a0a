"""Exhaustive strategy search over the guillotine packer.

The guillotine packer is greedy, so its result depends heavily on the order
pieces arrive in and on the split rule. The search runs it over a fixed grid
of sort orders x split policies x sheet orientations and keeps the attempt
that places the most pieces, breaking ties by covered area. Grid order is
fixed and the first attempt wins ties, so identical input always produces
identical output.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import Callable, Iterator, Sequence

from sheetcut.domain.services.cut_lines import deduplicate_cut_lines
from sheetcut.domain.services.guillotine_packer import GuillotinePacker
from sheetcut.domain.services.piece_expander import expand_pieces
from sheetcut.domain.value_objects import (
    Instance,
    PackingResult,
    PackingStrategy,
    Piece,
    Sheet,
    SortOrder,
    SplitPolicy,
)

logger = logging.getLogger(__name__)

SORT_ORDERS: tuple[SortOrder, ...] = (
    SortOrder.AREA,
    SortOrder.LONGER_SIDE,
    SortOrder.HEIGHT_THEN_WIDTH,
    SortOrder.WIDTH_THEN_HEIGHT,
    SortOrder.PERIMETER,
)

SPLIT_POLICIES: tuple[SplitPolicy, ...] = (
    SplitPolicy.LONGER,
    SplitPolicy.SHORTER,
    SplitPolicy.AREA,
    SplitPolicy.HORIZONTAL,
    SplitPolicy.VERTICAL,
)

_SORT_KEYS: dict[SortOrder, Callable[[Instance], tuple[float, ...]]] = {
    SortOrder.AREA: lambda i: (i.width * i.height,),
    SortOrder.LONGER_SIDE: lambda i: (max(i.width, i.height),),
    SortOrder.HEIGHT_THEN_WIDTH: lambda i: (i.height, i.width),
    SortOrder.WIDTH_THEN_HEIGHT: lambda i: (i.width, i.height),
    SortOrder.PERIMETER: lambda i: (2 * (i.width + i.height),),
}


def sort_instances(instances: Sequence[Instance], order: SortOrder) -> list[Instance]:
    """Sort instances descending by the given order.

    The sort is stable, so instances with equal keys keep their expansion
    order.
    """
    return sorted(instances, key=_SORT_KEYS[order], reverse=True)


def score(result: PackingResult) -> tuple[int, float]:
    """Lexicographic score: placed count first, then covered area."""
    return (result.placed_count, round(result.used_area, 6))


def run_attempt(
    instances: Sequence[Instance],
    sheet: Sheet,
    strategy: PackingStrategy,
) -> PackingResult:
    """Run the packer once for one grid point.

    Transposed attempts pack the sheet turned a quarter turn and map the
    result back onto the original orientation.

    Args:
        instances: Expanded piece copies in request order.
        sheet: The sheet as given by the caller.
        strategy: Sort order, split policy and orientation to use.

    Returns:
        PackingResult in the original sheet's coordinates, tagged with
        its strategy. Cut lines are not deduplicated.
    """
    ordered = sort_instances(instances, strategy.sort_order)
    packer = GuillotinePacker(strategy.split_policy)
    if strategy.transposed:
        target = sheet.transposed()
        result = packer.pack(ordered, target.width, target.height).transposed()
    else:
        result = packer.pack(ordered, sheet.width, sheet.height)
    return result.with_strategy(strategy)


class StrategySearch:
    """Drives the guillotine packer across a grid of strategies.

    Attributes:
        sort_orders: Sort orders to try (outer loop, in order).
        split_policies: Split policies to try (inner loop, in order).
        try_transposed: Also pack the quarter-turned sheet when the sheet
            is not square.
        max_workers: Process count for evaluating attempts in parallel.
            None or 1 evaluates sequentially.
    """

    def __init__(
        self,
        sort_orders: Sequence[SortOrder] = SORT_ORDERS,
        split_policies: Sequence[SplitPolicy] = SPLIT_POLICIES,
        try_transposed: bool = True,
        max_workers: int | None = None,
    ) -> None:
        if not sort_orders:
            raise ValueError("At least one sort order is required")
        if not split_policies:
            raise ValueError("At least one split policy is required")
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.sort_orders = tuple(sort_orders)
        self.split_policies = tuple(split_policies)
        self.try_transposed = try_transposed
        self.max_workers = max_workers

    def plan_attempts(self, sheet: Sheet) -> list[PackingStrategy]:
        """Enumerate grid points in evaluation (and tie-break) order."""
        attempts: list[PackingStrategy] = []
        for sort_order in self.sort_orders:
            for split_policy in self.split_policies:
                attempts.append(PackingStrategy(sort_order, split_policy))
                if self.try_transposed and not sheet.is_square:
                    attempts.append(
                        PackingStrategy(sort_order, split_policy, transposed=True)
                    )
        return attempts

    def find_best_packing(
        self,
        pieces: Sequence[Piece],
        sheet_width: float,
        sheet_height: float,
    ) -> PackingResult:
        """Find the best single-sheet packing over the strategy grid.

        Args:
            pieces: Requested pieces (quantities are expanded here).
            sheet_width: Sheet width.
            sheet_height: Sheet height.

        Returns:
            The highest-scoring PackingResult with deduplicated cut lines.

        Raises:
            ValueError: If the sheet dimensions are not positive.
        """
        sheet = Sheet(width=sheet_width, height=sheet_height)
        instances = tuple(expand_pieces(pieces))
        strategies = self.plan_attempts(sheet)

        logger.debug(
            "Searching %d strategies for %d instances on %sx%s sheet",
            len(strategies),
            len(instances),
            sheet.width,
            sheet.height,
        )

        best: PackingResult | None = None
        best_score: tuple[int, float] | None = None
        for result in self._evaluate(instances, sheet, strategies):
            candidate = score(result)
            logger.debug(
                "Strategy %s placed %d (area %.1f)",
                result.strategy.describe() if result.strategy else "?",
                candidate[0],
                candidate[1],
            )
            if best_score is None or candidate > best_score:
                best = result
                best_score = candidate

        if best is None:
            # plan_attempts always yields at least one strategy
            raise RuntimeError("Strategy search produced no attempts")

        logger.info(
            "Best packing places %d of %d pieces (%s)",
            best.placed_count,
            len(instances),
            best.strategy.describe() if best.strategy else "?",
        )
        return best.with_cut_lines(deduplicate_cut_lines(best.cut_lines))

    def _evaluate(
        self,
        instances: tuple[Instance, ...],
        sheet: Sheet,
        strategies: list[PackingStrategy],
    ) -> Iterator[PackingResult]:
        """Yield attempt results in strategy order."""
        if self.max_workers is not None and self.max_workers > 1 and len(strategies) > 1:
            # map() yields in submission order, keeping the tie-break stable
            with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
                yield from executor.map(
                    run_attempt, repeat(instances), repeat(sheet), strategies
                )
            return

        for strategy in strategies:
            yield run_attempt(instances, sheet, strategy)


def find_best_packing(
    pieces: Sequence[Piece],
    sheet_width: float,
    sheet_height: float,
) -> PackingResult:
    """Run the default 5 x 5 x 2 strategy search sequentially."""
    return StrategySearch().find_best_packing(pieces, sheet_width, sheet_height)
