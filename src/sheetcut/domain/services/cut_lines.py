"""Cut line post-processing."""

from __future__ import annotations

from typing import Iterable

from sheetcut.domain.value_objects import CutLine


def deduplicate_cut_lines(
    lines: Iterable[CutLine],
    precision: int = 1,
) -> tuple[CutLine, ...]:
    """Drop coincident cut lines, keeping the first occurrence.

    Two lines are the same cut when all four endpoint coordinates match
    after rounding to ``precision`` decimal places.

    Args:
        lines: Raw cut lines in emission order.
        precision: Decimal places used for the comparison.

    Returns:
        Tuple of unique lines in their original order.
    """
    seen: set[tuple[float, float, float, float]] = set()
    unique: list[CutLine] = []
    for line in lines:
        key = line.rounded_key(precision)
        if key in seen:
            continue
        seen.add(key)
        unique.append(line)
    return tuple(unique)
