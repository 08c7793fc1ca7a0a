"""Single-sheet guillotine packer using best short-side fit.

The packer keeps a list of free rectangles, initially the whole sheet. Each
instance goes into the free rectangle (and orientation) that leaves the
smallest short-side leftover. The L-shaped remainder is then divided by one
full-length cut into at most two new free rectangles, so every layout the
packer produces can be realized with straight edge-to-edge cuts on a table
saw or panel saw.

Instance order is decided by the caller; the packer is deterministic for a
given order.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from sheetcut.domain.value_objects import (
    CutLine,
    FreeRectangle,
    Instance,
    PackingResult,
    PlacedPiece,
    SplitAxis,
    SplitPolicy,
)

logger = logging.getLogger(__name__)

# Leftovers below this are treated as zero (float noise from subtraction)
TOLERANCE = 1e-9


def choose_split_axis(
    policy: SplitPolicy,
    rect: FreeRectangle,
    used_width: float,
    used_height: float,
) -> SplitAxis:
    """Decide the cut direction after placing a block in a free rectangle.

    When only one leftover is non-zero the axis is forced: a leftover strip
    below the block needs a horizontal cut, one to the right a vertical cut.
    Otherwise the split policy decides:

    - LONGER: horizontal if the rectangle is at least as wide as tall.
    - SHORTER: horizontal if the bottom leftover is no taller than the right
      leftover is wide.
    - AREA: horizontal if its larger remainder is at least as big as the
      vertical split's larger remainder.
    - HORIZONTAL / VERTICAL: fixed.

    Args:
        policy: Split policy in effect.
        rect: Free rectangle the block was placed in.
        used_width: Width of the block as placed.
        used_height: Height of the block as placed.

    Returns:
        The split axis to cut along.
    """
    right_w = _leftover(rect.width, used_width)
    bottom_h = _leftover(rect.height, used_height)

    if right_w == 0:
        return SplitAxis.HORIZONTAL
    if bottom_h == 0:
        return SplitAxis.VERTICAL

    if policy is SplitPolicy.LONGER:
        horizontal = rect.width >= rect.height
    elif policy is SplitPolicy.SHORTER:
        horizontal = bottom_h <= right_w
    elif policy is SplitPolicy.AREA:
        horizontal_big = max(rect.width * bottom_h, right_w * used_height)
        vertical_big = max(used_width * bottom_h, right_w * rect.height)
        horizontal = horizontal_big >= vertical_big
    elif policy is SplitPolicy.HORIZONTAL:
        horizontal = True
    else:
        horizontal = False

    return SplitAxis.HORIZONTAL if horizontal else SplitAxis.VERTICAL


def _leftover(available: float, used: float) -> float:
    remaining = available - used
    return remaining if remaining > TOLERANCE else 0.0


class GuillotinePacker:
    """Guillotine packer for one sheet and one split policy.

    Attributes:
        split_policy: Rule for choosing the cut direction after each
            placement when both leftovers are non-zero.
    """

    def __init__(self, split_policy: SplitPolicy = SplitPolicy.SHORTER) -> None:
        self.split_policy = split_policy

    def pack(
        self,
        instances: Sequence[Instance],
        sheet_width: float,
        sheet_height: float,
    ) -> PackingResult:
        """Place instances on the sheet in the given order.

        Instances that fit nowhere go to overflow; the loop always runs to
        completion and never raises for unplaceable pieces.

        Args:
            instances: Piece copies in the order they should be placed.
            sheet_width: Sheet width.
            sheet_height: Sheet height.

        Returns:
            PackingResult with placements, overflow and raw (not yet
            deduplicated) cut lines.
        """
        free_rects: list[FreeRectangle] = [
            FreeRectangle(x=0.0, y=0.0, width=sheet_width, height=sheet_height)
        ]
        placed: list[PlacedPiece] = []
        overflow: list[Instance] = []
        cut_lines: list[CutLine] = []

        for instance in instances:
            choice = self._find_best_fit(instance, free_rects)
            if choice is None:
                logger.debug(
                    "No free rectangle admits %sx%s (copy %d), overflowing",
                    instance.width,
                    instance.height,
                    instance.index,
                )
                overflow.append(instance)
                continue

            rect_index, rotated = choice
            rect = free_rects.pop(rect_index)
            used_w = instance.height if rotated else instance.width
            used_h = instance.width if rotated else instance.height

            placed.append(
                PlacedPiece(
                    piece=instance.piece,
                    x=rect.x,
                    y=rect.y,
                    rotated=rotated,
                    index=instance.index,
                )
            )

            new_rects, new_lines = self._split(rect, used_w, used_h)
            free_rects.extend(new_rects)
            cut_lines.extend(new_lines)

            # Ascending by area; list.sort is stable so equal areas keep order
            free_rects.sort(key=lambda r: r.area)

        logger.debug(
            "Packed %d of %d instances with %s split (%d free rectangles left)",
            len(placed),
            len(instances),
            self.split_policy.value,
            len(free_rects),
        )

        return PackingResult(
            placed=tuple(placed),
            overflow=tuple(overflow),
            cut_lines=tuple(cut_lines),
        )

    def _find_best_fit(
        self,
        instance: Instance,
        free_rects: list[FreeRectangle],
    ) -> tuple[int, bool] | None:
        """Find the free rectangle and orientation with best short-side fit.

        Candidates are visited in free-rectangle order, unrotated before
        rotated; the first candidate with the lowest score wins.

        Args:
            instance: The piece copy to place.
            free_rects: Current free rectangles.

        Returns:
            Tuple of (rectangle index, rotated), or None if nothing admits
            the instance in either orientation.
        """
        best: tuple[int, bool] | None = None
        best_score = math.inf

        for i, rect in enumerate(free_rects):
            for rotated in (False, True):
                width = instance.height if rotated else instance.width
                height = instance.width if rotated else instance.height
                if not rect.fits(width, height):
                    continue
                score = min(rect.width - width, rect.height - height)
                if score < best_score:
                    best_score = score
                    best = (i, rotated)

        return best

    def _split(
        self,
        rect: FreeRectangle,
        used_width: float,
        used_height: float,
    ) -> tuple[list[FreeRectangle], list[CutLine]]:
        """Divide the leftover of a placement into free rectangles.

        Args:
            rect: Free rectangle the block was placed in (at its origin).
            used_width: Width of the block as placed.
            used_height: Height of the block as placed.

        Returns:
            Tuple of (new free rectangles, cut lines emitted by the split).
        """
        right_w = _leftover(rect.width, used_width)
        bottom_h = _leftover(rect.height, used_height)

        if right_w == 0 and bottom_h == 0:
            return [], []

        axis = choose_split_axis(self.split_policy, rect, used_width, used_height)
        cut_x = rect.x + used_width
        cut_y = rect.y + used_height
        rects: list[FreeRectangle] = []
        lines: list[CutLine] = []

        if axis is SplitAxis.HORIZONTAL:
            # Full-width cut under the block, then the block's strip is
            # trimmed on its right
            lines.append(CutLine(x1=rect.x, y1=cut_y, x2=rect.x + rect.width, y2=cut_y))
            if right_w > 0:
                lines.append(CutLine(x1=cut_x, y1=rect.y, x2=cut_x, y2=cut_y))
                rects.append(
                    FreeRectangle(x=cut_x, y=rect.y, width=right_w, height=used_height)
                )
            if bottom_h > 0:
                rects.append(
                    FreeRectangle(x=rect.x, y=cut_y, width=rect.width, height=bottom_h)
                )
        else:
            # Full-height cut right of the block, then the block's strip is
            # trimmed below it
            lines.append(CutLine(x1=cut_x, y1=rect.y, x2=cut_x, y2=rect.y + rect.height))
            if bottom_h > 0:
                lines.append(CutLine(x1=rect.x, y1=cut_y, x2=cut_x, y2=cut_y))
                rects.append(
                    FreeRectangle(x=rect.x, y=cut_y, width=used_width, height=bottom_h)
                )
            if right_w > 0:
                rects.append(
                    FreeRectangle(x=cut_x, y=rect.y, width=right_w, height=rect.height)
                )

        return rects, lines
