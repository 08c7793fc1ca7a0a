"""CLI command modules."""

from sheetcut.cli.commands.plan import parse_piece_spec, plan_command
from sheetcut.cli.commands.validate import validate_command

__all__ = [
    "parse_piece_spec",
    "plan_command",
    "validate_command",
]
