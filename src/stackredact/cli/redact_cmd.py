"""stackredact redact -- parse a Carp stack trace and mask sensitive arguments.

Reads the trace from a file or stdin, applies the sensitive argument
names from --name, --config, or the project's stackredact.yaml, and
prints a table, Carp-style text, or JSON.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from stackredact.cli.output import (
    format_frames_text,
    frames_to_json,
    render_frames_table,
)
from stackredact.models.config import (
    InvalidConfiguration,
    load_config_file,
    load_project_config,
)
from stackredact.redaction.redactor import Redactor


def _read_trace(trace_file: str | None) -> str:
    if trace_file is None or trace_file == "-":
        return sys.stdin.read()
    path = Path(trace_file)
    if not path.is_file():
        typer.echo(f"Error: File not found: {trace_file}", err=True)
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


def _resolve_names(
    names: list[str] | None,
    config: Path | None,
) -> list[str] | None:
    """--name wins over --config, which wins over stackredact.yaml."""
    if names:
        return names
    if config is not None:
        if not config.is_file():
            typer.echo(f"Error: Config file not found: {config}", err=True)
            raise typer.Exit(code=1)
        return load_config_file(config).sensitive_argument_names
    return load_project_config().sensitive_argument_names


def redact(
    trace_file: Optional[str] = typer.Argument(
        None, help="File holding the stack trace (default: stdin)"
    ),
    names: Optional[list[str]] = typer.Option(
        None,
        "--name",
        "-n",
        help="Sensitive argument name; repeat to give several. Replaces the defaults.",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a stackredact.yaml config file"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print frames as JSON"),
    as_text: bool = typer.Option(False, "--text", help="Print Carp-style redacted lines"),
) -> None:
    """Parse a stack trace and print it with sensitive arguments redacted."""
    if as_json and as_text:
        typer.echo("Error: --json and --text are mutually exclusive", err=True)
        raise typer.Exit(code=1)

    try:
        redactor = Redactor(_resolve_names(names, config))
    except InvalidConfiguration as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    frames = redactor.parse_stack_trace(_read_trace(trace_file))

    if as_json:
        typer.echo(frames_to_json(frames))
    elif as_text:
        typer.echo(format_frames_text(frames))
    else:
        render_frames_table(frames, Console())
