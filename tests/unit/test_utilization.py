"""Tests for utilization metrics."""

import pytest

from sheetcut.domain import (
    Instance,
    PackingResult,
    Piece,
    PlacedPiece,
    UtilizationReporter,
)


@pytest.fixture
def reporter() -> UtilizationReporter:
    """Create a utilization reporter."""
    return UtilizationReporter()


class TestUtilizationReporter:
    """Tests for UtilizationReporter."""

    def test_partial_coverage(self, reporter: UtilizationReporter) -> None:
        """Waste is the uncovered share of the sheet."""
        piece = Piece(piece_id="P1", width=100.0, height=50.0, quantity=2)
        result = PackingResult(
            placed=(PlacedPiece(piece, 0.0, 0.0),),
            overflow=(Instance(piece, 1),),
        )

        metrics = reporter.report(result, 200.0, 100.0, [piece])

        assert metrics.sheet_area == 20000.0
        assert metrics.used_area == 5000.0
        assert metrics.waste_area == 15000.0
        assert metrics.waste_percentage == 75.0
        assert metrics.utilization_percentage == 25.0
        assert metrics.total_pieces == 2
        assert metrics.placed_count == 1
        assert metrics.overflow_count == 1
        assert not metrics.fits

    def test_exact_fit_has_no_waste(self, reporter: UtilizationReporter) -> None:
        """A sheet-sized piece leaves zero waste."""
        piece = Piece(piece_id="P1", width=275.0, height=185.0)
        result = PackingResult(placed=(PlacedPiece(piece, 0.0, 0.0),))

        metrics = reporter.report(result, 275.0, 185.0, [piece])

        assert metrics.waste_area == 0.0
        assert metrics.waste_percentage == 0.0
        assert metrics.fits

    def test_empty_result_is_all_waste(self, reporter: UtilizationReporter) -> None:
        """Nothing placed means the whole sheet is waste."""
        metrics = reporter.report(PackingResult(), 275.0, 185.0, [])
        assert metrics.waste_percentage == 100.0
        assert metrics.total_pieces == 0

    def test_waste_formula(self, reporter: UtilizationReporter) -> None:
        """Waste percentage is (sheet - used) / sheet * 100."""
        piece = Piece(piece_id="P1", width=80.0, height=50.0)
        result = PackingResult(placed=(PlacedPiece(piece, 0.0, 0.0),))

        metrics = reporter.report(result, 275.0, 185.0, [piece])

        assert metrics.waste_percentage == pytest.approx((50875.0 - 4000.0) / 50875.0 * 100)
