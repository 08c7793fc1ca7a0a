"""Advisory checks for validated cut job configurations."""

from __future__ import annotations

from dataclasses import dataclass

from sheetcut.application.config.schema import CutJobConfiguration


@dataclass(frozen=True)
class ValidationWarning:
    """Non-blocking issue found in a job configuration.

    Attributes:
        path: JSON path of the offending entry (e.g. "pieces[2]").
        message: Human-readable description.
    """

    path: str
    message: str


def check_oversized_pieces(config: CutJobConfiguration) -> list[ValidationWarning]:
    """Warn about pieces larger than the sheet in both orientations.

    Such pieces are valid input but always end up in overflow.
    """
    sheet_w = config.sheet.width
    sheet_h = config.sheet.height
    warnings: list[ValidationWarning] = []
    for i, piece in enumerate(config.pieces):
        fits_normal = piece.width <= sheet_w and piece.height <= sheet_h
        fits_rotated = piece.height <= sheet_w and piece.width <= sheet_h
        if fits_normal or fits_rotated:
            continue
        name = piece.label or f"Piece {i + 1}"
        warnings.append(
            ValidationWarning(
                path=f"pieces[{i}]",
                message=(
                    f"{name} ({piece.width:g} x {piece.height:g}) is larger than the "
                    f"{sheet_w:g} x {sheet_h:g} sheet and will not be placed"
                ),
            )
        )
    return warnings
