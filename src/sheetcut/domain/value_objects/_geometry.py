"""Piece, sheet and rectangle value objects."""

from __future__ import annotations

from dataclasses import dataclass

# Default raw sheet: standard MDF board, 275 x 185 cm
DEFAULT_SHEET_WIDTH: float = 275.0
DEFAULT_SHEET_HEIGHT: float = 185.0


@dataclass(frozen=True)
class Piece:
    """A rectangular panel requested from the sheet.

    Attributes:
        piece_id: Caller-assigned identity, stable across packing runs.
        width: Piece width in sheet units.
        height: Piece height in sheet units.
        quantity: Number of identical copies to cut.
        label: Optional display name.
    """

    piece_id: str
    width: float
    height: float
    quantity: int = 1
    label: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Piece dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def area(self) -> float:
        """Area of a single copy."""
        return self.width * self.height

    @property
    def total_area(self) -> float:
        """Area of all copies together."""
        return self.area * self.quantity

    def display_name(self, position: int) -> str:
        """Label, or "Piece N" for unlabeled pieces (1-based position)."""
        label = self.label.strip()
        return label if label else f"Piece {position}"


@dataclass(frozen=True)
class Sheet:
    """Raw sheet that pieces are cut from."""

    width: float = DEFAULT_SHEET_WIDTH
    height: float = DEFAULT_SHEET_HEIGHT

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Sheet width must be positive")
        if self.height <= 0:
            raise ValueError("Sheet height must be positive")

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    def transposed(self) -> Sheet:
        """Same sheet turned a quarter turn (width and height swapped)."""
        return Sheet(width=self.height, height=self.width)


@dataclass(frozen=True)
class Instance:
    """One physical copy of a piece, tracked through a single packing run.

    Attributes:
        piece: The requested piece this copy belongs to.
        index: Zero-based copy number within the piece's quantity.
    """

    piece: Piece
    index: int = 0

    @property
    def width(self) -> float:
        return self.piece.width

    @property
    def height(self) -> float:
        return self.piece.height

    @property
    def area(self) -> float:
        return self.piece.area


@dataclass(frozen=True)
class FreeRectangle:
    """Empty axis-aligned region of the sheet available for placement."""

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def fits(self, width: float, height: float) -> bool:
        """Check whether a width x height block fits without rotation."""
        return width <= self.width and height <= self.height


@dataclass(frozen=True)
class PlacedPiece:
    """A piece copy bound to a position on the sheet.

    Coordinates are measured from the sheet origin (top-left corner, y grows
    downward along the sheet height).

    Attributes:
        piece: The requested piece being placed.
        x: Horizontal offset of the piece origin.
        y: Vertical offset of the piece origin.
        rotated: True if the piece is turned 90 degrees.
        index: Zero-based copy number within the piece's quantity.
    """

    piece: Piece
    x: float
    y: float
    rotated: bool = False
    index: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def placed_width(self) -> float:
        """Width of piece as placed (accounts for rotation)."""
        return self.piece.height if self.rotated else self.piece.width

    @property
    def placed_height(self) -> float:
        """Height of piece as placed (accounts for rotation)."""
        return self.piece.width if self.rotated else self.piece.height

    @property
    def right_edge(self) -> float:
        return self.x + self.placed_width

    @property
    def top_edge(self) -> float:
        return self.y + self.placed_height

    @property
    def area(self) -> float:
        return self.piece.area

    @property
    def instance(self) -> Instance:
        return Instance(piece=self.piece, index=self.index)

    def overlap_area(self, other: PlacedPiece) -> float:
        """Area shared with another placement (zero when they only touch)."""
        dx = min(self.right_edge, other.right_edge) - max(self.x, other.x)
        dy = min(self.top_edge, other.top_edge) - max(self.y, other.y)
        if dx <= 0 or dy <= 0:
            return 0.0
        return dx * dy

    def transposed(self) -> PlacedPiece:
        """Mirror across the sheet diagonal: swap x/y and flip rotation."""
        return PlacedPiece(
            piece=self.piece,
            x=self.y,
            y=self.x,
            rotated=not self.rotated,
            index=self.index,
        )


@dataclass(frozen=True)
class CutLine:
    """One straight guillotine cut, either horizontal or vertical."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2

    @property
    def length(self) -> float:
        return abs(self.x2 - self.x1) + abs(self.y2 - self.y1)

    def rounded_key(self, precision: int = 1) -> tuple[float, float, float, float]:
        """Endpoint coordinates rounded for coincidence checks."""
        return (
            round(self.x1, precision),
            round(self.y1, precision),
            round(self.x2, precision),
            round(self.y2, precision),
        )

    def transposed(self) -> CutLine:
        return CutLine(x1=self.y1, y1=self.x1, x2=self.y2, y2=self.x2)
