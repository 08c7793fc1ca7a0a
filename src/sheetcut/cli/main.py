"""Typer CLI for sheet cut planning."""

import typer

from sheetcut.cli.commands import plan_command, validate_command

app = typer.Typer(
    name="sheetcut",
    help="Plan guillotine cuts of rectangular panels from one sheet.",
    no_args_is_help=True,
)

app.command(name="plan")(plan_command)
app.command(name="validate")(validate_command)


def main() -> None:
    """Entry point for the sheetcut console script."""
    app()


if __name__ == "__main__":
    main()
