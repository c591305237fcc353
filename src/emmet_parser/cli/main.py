"""Emmet CLI Main Entry Point

Expands Emmet abbreviations to markup.

Usage:
    emmet-parser 'ul>li.item*3'           # Expand one abbreviation
    emmet-parser 'div+p' 'a{Click}'       # One output line per abbreviation
    echo 'ul>li*3' | emmet-parser         # Read abbreviations from stdin
    emmet-parser --tree 'ul>li*3'         # Print the parse tree as JSON
    emmet-parser -d --title Demo 'p{Hi}'  # Wrap the output in an HTML page
    emmet-parser --examples               # Show the built-in examples
    emmet-parser -c emmet.yaml 'x'        # Use a specific config file
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer

from emmet_parser._version import __version__
from emmet_parser.ast.node import to_json
from emmet_parser.cli.document import render_document
from emmet_parser.cli.errors import exit_with_error, report_error
from emmet_parser.cli.examples import examples_table
from emmet_parser.cli.utils import console, load_config, setup_logging
from emmet_parser.compiler.renderer import Renderer
from emmet_parser.exceptions import ConfigError, EmmetError
from emmet_parser.pipeline import parse_emmet


def read_abbreviations(stream) -> List[str]:
    """Read one abbreviation per non-blank line."""
    return [line.strip() for line in stream.read().splitlines() if line.strip()]


typer_app = typer.Typer()


@typer_app.command()
def cli(
    ctx: typer.Context,
    abbreviations: Optional[List[str]] = typer.Argument(
        None, help="Abbreviations to expand. Read from stdin when omitted."
    ),
    config_file: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to emmet.yaml file."
    ),
    tree: bool = typer.Option(
        False, "--tree", help="Print the parse tree as JSON instead of markup."
    ),
    document: bool = typer.Option(
        False, "-d", "--document", help="Wrap the markup in an HTML document."
    ),
    title: str = typer.Option(
        "Document", "--title", help="Document title used with --document."
    ),
    examples: bool = typer.Option(
        False, "--examples", help="Show the built-in examples and exit."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Expand Emmet abbreviations to markup.

    \b
    Examples:
        emmet-parser 'div#main>p{Hello}+ul>li*2'
        emmet-parser --tree 'a[href="/"]{Home}'
    """
    if version:
        typer.echo(f"emmet-parser {__version__}")
        raise typer.Exit()

    setup_logging(verbose)

    try:
        config = load_config(config_file)
    except ConfigError as exc:
        exit_with_error(exc)

    if examples:
        console.print(examples_table(config))
        raise typer.Exit()

    if abbreviations:
        items = list(abbreviations)
    elif not sys.stdin.isatty():
        items = read_abbreviations(sys.stdin)
    else:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    renderer = Renderer(config)
    failed = 0

    for abbreviation in items:
        try:
            elements = parse_emmet(abbreviation, config)
        except EmmetError as exc:
            report_error(exc)
            failed += 1
            continue

        if tree:
            output = to_json(elements)
        else:
            output = renderer.render(elements)
            if document:
                output = render_document(output, title=title).rstrip("\n")

        typer.echo(output)

    if failed:
        raise typer.Exit(code=1)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
