"""Shared error handling for the CLI."""

from typing import NoReturn

import typer

from emmet_parser.exceptions import EmmetError


def report_error(error: EmmetError) -> None:
    """Print an abbreviation or config error to stderr."""
    typer.secho(f"Error: {error.message}", err=True, fg=typer.colors.RED)


def exit_with_error(error: EmmetError, exit_code: int = 1) -> NoReturn:
    """Report the error and exit the program."""
    report_error(error)
    raise typer.Exit(code=exit_code)
