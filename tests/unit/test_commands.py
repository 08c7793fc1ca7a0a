"""Tests for the cut plan command and one-call entry point."""

from __future__ import annotations

import pytest

from sheetcut.application import (
    ComputeCutPlanCommand,
    PieceInput,
    SheetInput,
    compute_cut_plan,
)
from sheetcut.domain import PackingStrategy, SortOrder, SplitPolicy, StrategySearch


# =============================================================================
# DTO Tests
# =============================================================================


class TestSheetInput:
    """Tests for SheetInput."""

    def test_defaults_to_standard_sheet(self) -> None:
        """Default sheet is 275x185."""
        sheet = SheetInput().to_sheet()
        assert (sheet.width, sheet.height) == (275.0, 185.0)

    def test_validate(self) -> None:
        """Non-positive dimensions produce one message each."""
        assert SheetInput(width=0, height=-1).validate() == [
            "Sheet width must be positive",
            "Sheet height must be positive",
        ]


class TestPieceInput:
    """Tests for PieceInput."""

    def test_validate_uses_positional_name(self) -> None:
        """Unlabeled rows are named by position."""
        errors = PieceInput(width=0, height=10, quantity=0).validate(2)
        assert errors == [
            "Piece 2: width must be positive",
            "Piece 2: quantity must be at least 1",
        ]

    def test_validate_uses_label(self) -> None:
        """Labeled rows are named by label."""
        errors = PieceInput(width=10, height=-3, label="Door").validate(1)
        assert errors == ["Door: height must be positive"]

    def test_from_mapping_defaults(self) -> None:
        """Quantity and label are optional in mappings."""
        row = PieceInput.from_mapping({"width": "80", "height": 50})
        assert row == PieceInput(width=80.0, height=50.0, quantity=1, label="")

    def test_from_mapping_accepts_whole_float_quantity(self) -> None:
        """A float quantity with no fractional part is converted."""
        row = PieceInput.from_mapping({"width": 80, "height": 50, "quantity": 3.0})
        assert row.quantity == 3

    def test_from_mapping_rejects_fractional_quantity(self) -> None:
        """A fractional quantity is refused rather than truncated."""
        with pytest.raises(ValueError, match="whole number, got 2.7"):
            PieceInput.from_mapping({"width": 80, "height": 50, "quantity": 2.7})

    def test_compute_cut_plan_rejects_fractional_quantity(self) -> None:
        """The one-call entry point refuses fractional quantities."""
        with pytest.raises(ValueError, match="whole number"):
            compute_cut_plan([{"width": 80, "height": 50, "quantity": 2.7}], 275, 185)

    def test_is_complete(self) -> None:
        """Complete rows have positive size and quantity."""
        assert PieceInput(width=10, height=10).is_complete()
        assert not PieceInput(width=10, height=10, quantity=0).is_complete()


# =============================================================================
# ComputeCutPlanCommand Tests
# =============================================================================


class TestComputeCutPlanCommand:
    """Tests for ComputeCutPlanCommand."""

    def test_valid_request(self, cut_plan_command: ComputeCutPlanCommand) -> None:
        """A valid request returns a plan with metrics."""
        output = cut_plan_command.execute(
            SheetInput(),
            [PieceInput(width=80, height=50, quantity=2), PieceInput(width=60, height=60, quantity=3)],
        )

        assert output.is_valid
        assert output.fits
        assert output.errors == []
        assert [p.piece_id for p in output.pieces] == ["P1", "P2"]
        assert output.metrics is not None
        assert output.metrics.total_pieces == 5
        assert output.metrics.waste_percentage == pytest.approx(
            (50875.0 - 18800.0) / 50875.0 * 100
        )

    def test_collects_all_errors(self, cut_plan_command: ComputeCutPlanCommand) -> None:
        """Every invalid row is reported and nothing is packed."""
        output = cut_plan_command.execute(
            SheetInput(),
            [PieceInput(width=0, height=10), PieceInput(width=10, height=10, label="Shelf", quantity=0)],
        )

        assert not output.is_valid
        assert output.result is None
        assert output.errors == [
            "Piece 1: width must be positive",
            "Shelf: quantity must be at least 1",
        ]
        assert output.sheet is not None

    def test_invalid_sheet(self, cut_plan_command: ComputeCutPlanCommand) -> None:
        """An invalid sheet is reported and left out of the output."""
        output = cut_plan_command.execute(
            SheetInput(width=0, height=185), [PieceInput(width=10, height=10)]
        )
        assert output.errors == ["Sheet width must be positive"]
        assert output.sheet is None

    def test_skip_invalid_drops_incomplete_rows(
        self, cut_plan_command: ComputeCutPlanCommand
    ) -> None:
        """skip_invalid packs only complete rows."""
        output = cut_plan_command.execute(
            SheetInput(),
            [PieceInput(width=0, height=10), PieceInput(width=40, height=30, label="Side")],
            skip_invalid=True,
        )

        assert output.is_valid
        assert [p.label for p in output.pieces] == ["Side"]
        assert output.pieces[0].piece_id == "P1"

    def test_instance_limit(self) -> None:
        """Requests expanding past max_instances are refused."""
        command = ComputeCutPlanCommand(max_instances=5)
        output = command.execute(SheetInput(), [PieceInput(width=10, height=10, quantity=6)])
        assert output.errors == ["Too many pieces: 6 requested, maximum is 5"]

    def test_invalid_instance_limit_raises(self) -> None:
        """max_instances must be positive."""
        with pytest.raises(ValueError, match="max_instances"):
            ComputeCutPlanCommand(max_instances=0)

    def test_overflow_is_not_an_error(
        self, cut_plan_command: ComputeCutPlanCommand
    ) -> None:
        """Pieces that do not fit are reported as overflow."""
        output = cut_plan_command.execute(SheetInput(), [PieceInput(width=300, height=300)])

        assert output.is_valid
        assert not output.fits
        assert output.result is not None
        assert output.result.overflow_count == 1
        assert output.metrics is not None
        assert output.metrics.waste_percentage == 100.0

    def test_display_name(self, cut_plan_command: ComputeCutPlanCommand) -> None:
        """Output names pieces by label or request position."""
        output = cut_plan_command.execute(
            SheetInput(),
            [PieceInput(width=10, height=10, label="Back"), PieceInput(width=20, height=20)],
        )
        first, second = output.pieces
        assert output.display_name(first) == "Back"
        assert output.display_name(second) == "Piece 2"


class TestComputeCutPlan:
    """Tests for the compute_cut_plan entry point."""

    def test_accepts_mappings(self) -> None:
        """Plain dictionaries are accepted as piece rows."""
        plan = compute_cut_plan([{"width": 80, "height": 50, "quantity": 2}], 275, 185)
        assert plan.fits
        assert plan.result is not None
        assert plan.result.placed_count == 2

    def test_exact_fit(self) -> None:
        """A sheet-sized piece leaves no waste."""
        plan = compute_cut_plan([PieceInput(width=275, height=185)], 275, 185)
        assert plan.result is not None
        placed = plan.result.placed[0]
        assert (placed.x, placed.y, placed.rotated) == (0.0, 0.0, False)
        assert plan.metrics is not None
        assert plan.metrics.waste_percentage == 0.0

    def test_custom_search(self) -> None:
        """A supplied search restricts the grid."""
        search = StrategySearch(
            sort_orders=[SortOrder.AREA],
            split_policies=[SplitPolicy.VERTICAL],
            try_transposed=False,
        )
        plan = compute_cut_plan(
            [{"width": 40, "height": 30}], 100, 50, search=search
        )
        assert plan.result is not None
        assert plan.result.strategy == PackingStrategy(SortOrder.AREA, SplitPolicy.VERTICAL)

    def test_invalid_input_reports_errors(self) -> None:
        """Invalid rows come back as messages, not exceptions."""
        plan = compute_cut_plan([{"width": -1, "height": 10}], 275, 185)
        assert not plan.is_valid
        assert plan.errors == ["Piece 1: width must be positive"]
