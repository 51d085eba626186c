"""Call frame models for parsed and redacted stack traces.

Pydantic models (not dataclasses) because frames are handed to logging
pipelines and dumped to JSON. Pydantic gives us model_dump for free.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CallFrame(BaseModel):
    """A single call site from a parsed stack trace.

    arguments_list keeps the positional order of the original call.
    Named arguments appear as two consecutive entries (name, value).
    None entries stand for undefined values. message is only set on the
    header frame and holds the text Carp printed before "at FILE line N".
    """

    message: str | None = None
    arguments_string: str | None = None
    arguments_list: list[str | None] | None = None
    line: int | None = None
    subroutine: str | None = None
    file: str | None = None
    raw: str = ""


class RedactedCallFrame(BaseModel):
    """A call frame with a masked copy of its argument list.

    arguments_string, arguments_list and line are the input frame's
    values, untouched. redacted_arguments_list always has the same
    length as arguments_list (empty when it is absent).
    """

    message: str | None = None
    arguments_string: str | None = None
    arguments_list: list[str | None] | None = None
    redacted_arguments_list: list[str | None] = Field(default_factory=list)
    line: int | None = None
    subroutine: str | None = None
    file: str | None = None

    def format_line(self) -> str:
        """Render the frame as a Carp-style trace line using redacted values."""
        where = " ".join(
            part
            for part in (self.file, f"line {self.line}" if self.line is not None else None)
            if part
        ) or "unknown location"
        if self.subroutine is None and self.arguments_list is None:
            # Header frame: the location the trace was raised from.
            if self.message:
                return f"{self.message} at {where}."
            return f"at {where}"

        name = self.subroutine or "<frame>"
        location = f" called at {where}"
        if self.arguments_list is None:
            return f"{name}{location}"
        args = ", ".join(_format_argument(a) for a in self.redacted_arguments_list)
        return f"{name}({args}){location}"


def _format_argument(value: str | None) -> str:
    if value is None:
        return "undef"
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
