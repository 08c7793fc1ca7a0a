"""Area and waste figures for a finished packing."""

from __future__ import annotations

import logging
from typing import Sequence

from sheetcut.domain.value_objects import PackingResult, Piece, UtilizationMetrics

logger = logging.getLogger(__name__)


class UtilizationReporter:
    """Derives utilization metrics from a packing result."""

    def report(
        self,
        result: PackingResult,
        sheet_width: float,
        sheet_height: float,
        pieces: Sequence[Piece],
    ) -> UtilizationMetrics:
        """Compute sheet usage for a packing result.

        Waste is calculated as: (sheet area - used area) / sheet area

        Args:
            result: Packing result to measure.
            sheet_width: Sheet width.
            sheet_height: Sheet height.
            pieces: The originally requested pieces (for the requested count).

        Returns:
            UtilizationMetrics for the sheet.
        """
        sheet_area = sheet_width * sheet_height
        used_area = result.used_area
        waste_area = sheet_area - used_area
        waste_percentage = (waste_area / sheet_area) * 100 if sheet_area > 0 else 0.0
        total_pieces = sum(p.quantity for p in pieces)

        logger.debug(
            "Sheet %sx%s: %d/%d pieces placed, %.1f%% waste",
            sheet_width,
            sheet_height,
            result.placed_count,
            total_pieces,
            waste_percentage,
        )

        return UtilizationMetrics(
            sheet_area=sheet_area,
            used_area=used_area,
            waste_area=waste_area,
            waste_percentage=waste_percentage,
            total_pieces=total_pieces,
            placed_count=result.placed_count,
            overflow_count=result.overflow_count,
        )
