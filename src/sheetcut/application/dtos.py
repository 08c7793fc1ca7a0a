"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from sheetcut.domain import PackingResult, Piece, Sheet, UtilizationMetrics
from sheetcut.domain.value_objects import DEFAULT_SHEET_HEIGHT, DEFAULT_SHEET_WIDTH


@dataclass
class SheetInput:
    """Input DTO for sheet dimensions."""

    width: float = DEFAULT_SHEET_WIDTH
    height: float = DEFAULT_SHEET_HEIGHT

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Sheet width must be positive")
        if self.height <= 0:
            errors.append("Sheet height must be positive")
        return errors

    def to_sheet(self) -> Sheet:
        """Convert to Sheet value object."""
        return Sheet(width=self.width, height=self.height)


@dataclass
class PieceInput:
    """Input DTO for one row of the piece list."""

    width: float
    height: float
    quantity: int = 1
    label: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PieceInput:
        """Build from a mapping with width, height, quantity and label keys.

        Raises:
            ValueError: If a value is not numeric or the quantity is not a
                whole number.
        """
        quantity = float(data.get("quantity", 1))
        if not quantity.is_integer():
            raise ValueError(f"quantity must be a whole number, got {quantity:g}")
        return cls(
            width=float(data["width"]),
            height=float(data["height"]),
            quantity=int(quantity),
            label=str(data.get("label") or ""),
        )

    def validate(self, position: int) -> list[str]:
        """Validate input and return list of error messages.

        Args:
            position: 1-based row number used in messages.
        """
        name = self.label.strip() or f"Piece {position}"
        errors: list[str] = []
        if self.width <= 0:
            errors.append(f"{name}: width must be positive")
        if self.height <= 0:
            errors.append(f"{name}: height must be positive")
        if self.quantity < 1:
            errors.append(f"{name}: quantity must be at least 1")
        return errors

    def is_complete(self) -> bool:
        """True if the row has positive dimensions and quantity."""
        return self.width > 0 and self.height > 0 and self.quantity >= 1

    def to_piece(self, piece_id: str) -> Piece:
        """Convert to Piece value object."""
        return Piece(
            piece_id=piece_id,
            width=self.width,
            height=self.height,
            quantity=self.quantity,
            label=self.label,
        )


@dataclass
class CutPlanOutput:
    """Output DTO containing a cut plan.

    Attributes:
        sheet: Sheet the plan was computed for (None if the sheet was invalid).
        pieces: Pieces submitted to the engine, in request order.
        result: Best packing found (None if input was invalid).
        metrics: Utilization metrics for the result.
        errors: Validation error messages; empty when the plan is valid.
    """

    sheet: Sheet | None
    pieces: list[Piece] = field(default_factory=list)
    result: PackingResult | None = None
    metrics: UtilizationMetrics | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if plan computation succeeded."""
        return len(self.errors) == 0 and self.result is not None

    @property
    def fits(self) -> bool:
        """True if a valid plan places every requested piece."""
        return self.is_valid and self.result is not None and self.result.fits

    def position_of(self, piece: Piece) -> int:
        """1-based position of a piece in the request (0 if unknown)."""
        for i, candidate in enumerate(self.pieces, start=1):
            if candidate.piece_id == piece.piece_id:
                return i
        return 0

    def display_name(self, piece: Piece) -> str:
        return piece.display_name(self.position_of(piece))
