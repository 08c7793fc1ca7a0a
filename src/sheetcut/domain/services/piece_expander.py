"""Quantity expansion of requested pieces into individual instances."""

from __future__ import annotations

from typing import Sequence

from sheetcut.domain.value_objects import Instance, Piece


def expand_pieces(pieces: Sequence[Piece]) -> list[Instance]:
    """Expand pieces with quantity > 1 into individual instances.

    Each piece with quantity N becomes N instances indexed 0..N-1. Request
    order is preserved, and copies of one piece stay adjacent in ascending
    index order.

    Args:
        pieces: Sequence of requested pieces.

    Returns:
        Flat list of instances, one per physical copy.
    """
    expanded: list[Instance] = []
    for piece in pieces:
        for i in range(piece.quantity):
            expanded.append(Instance(piece=piece, index=i))
    return expanded
