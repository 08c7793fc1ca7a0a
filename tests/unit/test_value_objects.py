"""Tests for sheet packing value objects."""

from __future__ import annotations

import pytest

from sheetcut.domain.value_objects import (
    DEFAULT_SHEET_HEIGHT,
    DEFAULT_SHEET_WIDTH,
    CutLine,
    FreeRectangle,
    Instance,
    PackingResult,
    PackingStrategy,
    Piece,
    PlacedPiece,
    Sheet,
    SortOrder,
    SplitPolicy,
    UtilizationMetrics,
)


@pytest.fixture
def door() -> Piece:
    """Create an 80x50 labeled piece."""
    return Piece(piece_id="P1", width=80.0, height=50.0, quantity=2, label="Door")


# =============================================================================
# Piece Tests
# =============================================================================


class TestPiece:
    """Tests for Piece dataclass."""

    def test_area_and_total_area(self, door: Piece) -> None:
        """Test single and combined area."""
        assert door.area == 4000.0
        assert door.total_area == 8000.0

    def test_default_quantity_is_one(self) -> None:
        """Test that quantity defaults to a single copy."""
        piece = Piece(piece_id="P1", width=10.0, height=20.0)
        assert piece.quantity == 1
        assert piece.label == ""

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 10), (10, -5)])
    def test_non_positive_dimensions_raise(self, width: float, height: float) -> None:
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            Piece(piece_id="P1", width=width, height=height)

    def test_zero_quantity_raises(self) -> None:
        """Test that a quantity below one is rejected."""
        with pytest.raises(ValueError, match="Quantity must be at least 1"):
            Piece(piece_id="P1", width=10.0, height=10.0, quantity=0)

    def test_display_name_uses_label(self, door: Piece) -> None:
        """Test that a label is preferred over the positional name."""
        assert door.display_name(3) == "Door"

    def test_display_name_falls_back_to_position(self) -> None:
        """Test that blank labels produce 'Piece N'."""
        piece = Piece(piece_id="P4", width=10.0, height=10.0, label="   ")
        assert piece.display_name(4) == "Piece 4"

    def test_is_immutable(self, door: Piece) -> None:
        """Test that pieces cannot be modified."""
        with pytest.raises(AttributeError):
            door.width = 10.0  # type: ignore[misc]


# =============================================================================
# Sheet Tests
# =============================================================================


class TestSheet:
    """Tests for Sheet dataclass."""

    def test_default_size(self) -> None:
        """Test that the default sheet is the standard 275x185 board."""
        sheet = Sheet()
        assert sheet.width == DEFAULT_SHEET_WIDTH == 275.0
        assert sheet.height == DEFAULT_SHEET_HEIGHT == 185.0
        assert sheet.area == 50875.0

    def test_transposed_swaps_dimensions(self) -> None:
        """Test quarter-turned sheet."""
        assert Sheet(100.0, 50.0).transposed() == Sheet(50.0, 100.0)

    def test_is_square(self) -> None:
        """Test square detection."""
        assert Sheet(100.0, 100.0).is_square
        assert not Sheet(100.0, 50.0).is_square

    def test_invalid_width_raises(self) -> None:
        """Test that invalid width raises ValueError."""
        with pytest.raises(ValueError, match="width must be positive"):
            Sheet(width=0)

    def test_invalid_height_raises(self) -> None:
        """Test that invalid height raises ValueError."""
        with pytest.raises(ValueError, match="height must be positive"):
            Sheet(height=-10)


# =============================================================================
# FreeRectangle and Instance Tests
# =============================================================================


class TestFreeRectangle:
    """Tests for FreeRectangle dataclass."""

    def test_area(self) -> None:
        """Test area calculation."""
        assert FreeRectangle(10.0, 20.0, 30.0, 40.0).area == 1200.0

    def test_fits_inclusive(self) -> None:
        """Test that a block of exactly the same size fits."""
        rect = FreeRectangle(0.0, 0.0, 30.0, 40.0)
        assert rect.fits(30.0, 40.0)
        assert not rect.fits(30.1, 40.0)
        assert not rect.fits(40.0, 30.0)

    def test_fits_is_exact(self) -> None:
        """Test that a block a hair larger than the rectangle does not fit."""
        rect = FreeRectangle(0.0, 0.0, 0.3, 1.0)
        assert not rect.fits(0.1 + 0.2, 1.0)
        assert not rect.fits(0.3, 1.0 + 5e-10)


class TestInstance:
    """Tests for Instance dataclass."""

    def test_dimensions_come_from_piece(self, door: Piece) -> None:
        """Test that an instance reports its piece's size."""
        instance = Instance(piece=door, index=1)
        assert (instance.width, instance.height, instance.area) == (80.0, 50.0, 4000.0)


# =============================================================================
# PlacedPiece Tests
# =============================================================================


class TestPlacedPiece:
    """Tests for PlacedPiece dataclass."""

    def test_placed_dimensions_not_rotated(self, door: Piece) -> None:
        """Test placed dimensions without rotation."""
        placed = PlacedPiece(piece=door, x=0.0, y=0.0)
        assert placed.placed_width == 80.0
        assert placed.placed_height == 50.0

    def test_placed_dimensions_rotated(self, door: Piece) -> None:
        """Test placed dimensions with rotation."""
        placed = PlacedPiece(piece=door, x=0.0, y=0.0, rotated=True)
        assert placed.placed_width == 50.0  # Height becomes width
        assert placed.placed_height == 80.0  # Width becomes height

    def test_edge_calculations(self, door: Piece) -> None:
        """Test right and top edge calculations."""
        placed = PlacedPiece(piece=door, x=10.0, y=5.0)
        assert placed.right_edge == 90.0
        assert placed.top_edge == 55.0

    def test_invalid_position_raises(self, door: Piece) -> None:
        """Test that negative position raises ValueError."""
        with pytest.raises(
            ValueError, match="Position coordinates must be non-negative"
        ):
            PlacedPiece(piece=door, x=-1.0, y=0.0)

    def test_overlap_area(self, door: Piece) -> None:
        """Test intersection area between placements."""
        a = PlacedPiece(piece=door, x=0.0, y=0.0)
        b = PlacedPiece(piece=door, x=70.0, y=40.0)
        assert a.overlap_area(b) == 100.0
        assert b.overlap_area(a) == 100.0

    def test_touching_placements_do_not_overlap(self, door: Piece) -> None:
        """Test that shared edges count as zero overlap."""
        a = PlacedPiece(piece=door, x=0.0, y=0.0)
        b = PlacedPiece(piece=door, x=80.0, y=0.0)
        assert a.overlap_area(b) == 0.0

    def test_transposed(self, door: Piece) -> None:
        """Test mirroring across the sheet diagonal."""
        placed = PlacedPiece(piece=door, x=10.0, y=20.0, rotated=False, index=1)
        mirrored = placed.transposed()
        assert (mirrored.x, mirrored.y) == (20.0, 10.0)
        assert mirrored.rotated is True
        assert mirrored.index == 1
        assert mirrored.placed_width == placed.placed_height

    def test_instance_round_trip(self, door: Piece) -> None:
        """Test recovering the instance from a placement."""
        placed = PlacedPiece(piece=door, x=0.0, y=0.0, index=1)
        assert placed.instance == Instance(piece=door, index=1)


# =============================================================================
# CutLine Tests
# =============================================================================


class TestCutLine:
    """Tests for CutLine dataclass."""

    def test_orientation(self) -> None:
        """Test horizontal and vertical detection."""
        horizontal = CutLine(0.0, 50.0, 100.0, 50.0)
        vertical = CutLine(30.0, 0.0, 30.0, 50.0)
        assert horizontal.is_horizontal and not horizontal.is_vertical
        assert vertical.is_vertical and not vertical.is_horizontal

    def test_length(self) -> None:
        """Test cut length."""
        assert CutLine(0.0, 50.0, 100.0, 50.0).length == 100.0
        assert CutLine(30.0, 10.0, 30.0, 50.0).length == 40.0

    def test_rounded_key(self) -> None:
        """Test endpoint rounding to one decimal."""
        line = CutLine(0.04, 49.96, 100.0, 49.96)
        assert line.rounded_key() == (0.0, 50.0, 100.0, 50.0)

    def test_transposed(self) -> None:
        """Test that transposing turns a horizontal cut vertical."""
        line = CutLine(0.0, 40.0, 100.0, 40.0).transposed()
        assert line == CutLine(40.0, 0.0, 40.0, 100.0)
        assert line.is_vertical


# =============================================================================
# PackingStrategy and PackingResult Tests
# =============================================================================


class TestPackingStrategy:
    """Tests for PackingStrategy dataclass."""

    def test_describe(self) -> None:
        """Test human-readable description."""
        strategy = PackingStrategy(SortOrder.AREA, SplitPolicy.SHORTER, transposed=True)
        assert strategy.describe() == "sort=area, split=shorter, sheet=transposed"

    def test_enums_serialize_as_strings(self) -> None:
        """Test that strategy enums compare equal to their JSON values."""
        assert SortOrder.LONGER_SIDE == "longer_side"
        assert SplitPolicy("vertical") is SplitPolicy.VERTICAL


class TestPackingResult:
    """Tests for PackingResult dataclass."""

    def test_empty_result(self) -> None:
        """Test result with nothing requested."""
        result = PackingResult()
        assert result.placed_count == 0
        assert result.overflow_count == 0
        assert result.used_area == 0.0
        assert result.fits

    def test_counts_and_area(self, door: Piece) -> None:
        """Test counts and covered area."""
        result = PackingResult(
            placed=(PlacedPiece(piece=door, x=0.0, y=0.0),),
            overflow=(Instance(piece=door, index=1),),
        )
        assert result.placed_count == 1
        assert result.overflow_count == 1
        assert result.used_area == 4000.0
        assert not result.fits

    def test_transposed_maps_placements_and_lines(self, door: Piece) -> None:
        """Test that transposition applies to every placement and cut."""
        result = PackingResult(
            placed=(PlacedPiece(piece=door, x=0.0, y=50.0, rotated=True),),
            overflow=(Instance(piece=door, index=1),),
            cut_lines=(CutLine(0.0, 50.0, 185.0, 50.0),),
        )
        mapped = result.transposed()
        assert mapped.placed[0] == PlacedPiece(piece=door, x=50.0, y=0.0, rotated=False)
        assert mapped.cut_lines == (CutLine(50.0, 0.0, 50.0, 185.0),)
        assert mapped.overflow == result.overflow

    def test_with_strategy(self) -> None:
        """Test tagging a result with its strategy."""
        strategy = PackingStrategy(SortOrder.PERIMETER, SplitPolicy.AREA)
        assert PackingResult().with_strategy(strategy).strategy == strategy


class TestUtilizationMetrics:
    """Tests for UtilizationMetrics dataclass."""

    def test_derived_values(self) -> None:
        """Test utilization and waste threshold checks."""
        metrics = UtilizationMetrics(
            sheet_area=1000.0,
            used_area=600.0,
            waste_area=400.0,
            waste_percentage=40.0,
            total_pieces=3,
            placed_count=3,
            overflow_count=0,
        )
        assert metrics.utilization_percentage == 60.0
        assert metrics.fits
        assert metrics.exceeds_waste(30.0)
        assert not metrics.exceeds_waste(40.0)
