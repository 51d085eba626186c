"""stackredact validate -- check a configuration file.

Reports every problem in stackredact.yaml at once, with annotated or
CI-friendly formatting. Exits 1 when the file is invalid.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from stackredact.loader.errors import ErrorFormatter
from stackredact.loader.validator import validate_config_file
from stackredact.models.config import CONFIG_FILENAME, find_project_root


def validate(
    config_file: Optional[Path] = typer.Argument(
        None, help=f"Config file to validate (default: project {CONFIG_FILENAME})"
    ),
    ci: bool = typer.Option(False, "--ci", help="CI-friendly concise output"),
) -> None:
    """Validate a stackredact configuration file."""
    formatter = ErrorFormatter(ci_mode=ci)

    filepath = config_file or find_project_root() / CONFIG_FILENAME
    if not filepath.exists():
        typer.echo(f"Error: File not found: {filepath}", err=True)
        raise typer.Exit(code=1)

    source = filepath.read_text(encoding="utf-8")
    config, errors = validate_config_file(filepath)

    if errors:
        typer.echo(formatter.format_all(errors, source, str(filepath)), err=not ci)
        raise typer.Exit(code=1)

    names = config.sensitive_argument_names
    formatter.print_success(str(filepath))
    if names is None:
        typer.echo("  using default sensitive argument names")
    else:
        typer.echo(f"  {len(names)} sensitive argument name(s): {', '.join(names)}")
