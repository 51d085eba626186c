"""Terminal, text, and JSON rendering of redacted stack traces."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich import box
from rich.markup import escape
from rich.table import Table

from stackredact.redaction.redactor import REDACTED_PLACEHOLDER

if TYPE_CHECKING:
    from rich.console import Console

    from stackredact.models.frame import RedactedCallFrame


def _display_argument(value: str | None) -> str:
    if value is None:
        return "[dim]undef[/dim]"
    if value == REDACTED_PLACEHOLDER:
        return f"[bold red]{escape(value)}[/bold red]"
    return escape(repr(value))


def render_frames_table(frames: list[RedactedCallFrame], console: Console) -> None:
    """Print one table row per frame with its redacted arguments.

    Args:
        frames: Redacted frames in trace order.
        console: Rich Console for output.
    """
    if not frames:
        console.print("[yellow]No stack frames found.[/yellow]")
        return

    table = Table(box=box.ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Call")
    table.add_column("Location")
    table.add_column("Arguments")

    for index, frame in enumerate(frames):
        if frame.arguments_list is None:
            arguments = "[dim]-[/dim]"
        else:
            arguments = ", ".join(_display_argument(v) for v in frame.redacted_arguments_list)
        location = f"{frame.file or '?'}:{frame.line if frame.line is not None else '?'}"
        table.add_row(
            str(index),
            escape(frame.subroutine or frame.message or "(origin)"),
            escape(location),
            arguments,
        )

    console.print(table)


def format_frames_text(frames: list[RedactedCallFrame]) -> str:
    """Format frames as Carp-style lines, call frames indented by a tab."""
    lines = []
    for frame in frames:
        is_origin = frame.subroutine is None and frame.arguments_list is None
        lines.append(frame.format_line() if is_origin else f"\t{frame.format_line()}")
    return "\n".join(lines)


def frames_to_json(frames: list[RedactedCallFrame]) -> str:
    return json.dumps(
        [frame.model_dump(mode="json") for frame in frames],
        indent=2,
    )
