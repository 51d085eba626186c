"""stackredact CLI entry point."""

import logging

import typer

from stackredact import __version__
from stackredact.cli.redact_cmd import redact
from stackredact.cli.validate_cmd import validate

app = typer.Typer(
    name="stackredact",
    help="Parse Carp stack traces and redact sensitive arguments",
    no_args_is_help=True,
)

app.command()(redact)
app.command()(validate)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"stackredact {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Parse Carp stack traces and redact sensitive arguments."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
