"""Parser for Carp-style stack traces.

Turns the multi-line output of Carp longmess/confess into CallFrame
records, one per trace line. The layout handled is:

    Something failed at lib/App.pm line 42.
    	App::login('user', 'alice', 'password', 'hunter2') called at app.pl line 7
    	eval {...} called at app.pl line 5

The header line becomes a frame without arguments that keeps the
message text. Call lines carry the raw argument text plus the argument
list split on top-level commas.
"""

from __future__ import annotations

import logging
import re

from stackredact.models.frame import CallFrame

logger = logging.getLogger(__name__)

# Optional filehandle suffix Perl appends to die/warn locations,
# e.g. "line 12, <STDIN> line 3."
_LOCATION = r"(?P<file>.+?) line (?P<line>\d+)(?:, <[^>]*> (?:line|chunk) \d+)?\.?\s*$"

# Carp indents every call line; an unindented line is part of the message.
CALL_PATTERN = re.compile(
    r"^\s+(?P<sub>.+?)(?:\((?P<args>.*)\))?\s+called at " + _LOCATION
)
HEADER_PATTERN = re.compile(r"^(?P<message>.*) at " + _LOCATION)

UNDEF = "undef"


def split_arguments(arguments_string: str) -> list[str]:
    """Split a Carp argument string on top-level commas.

    Commas inside single-quoted values or parentheses do not split.
    Backslash escapes inside quotes are kept verbatim for decode_argument.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quote = False
    escaped = False
    depth = 0

    for char in arguments_string:
        if in_quote:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == "'":
                in_quote = False
            continue

        if char == "'":
            in_quote = True
        elif char == "(":
            depth += 1
        elif char == ")" and depth > 0:
            depth -= 1
        elif char == "," and depth == 0:
            tokens.append("".join(current))
            current = []
            continue
        current.append(char)

    tail = "".join(current)
    if tail.strip() or tokens:
        tokens.append(tail)
    return tokens


def decode_argument(token: str) -> str | None:
    """Convert one raw argument token into its value.

    Quoted strings are unquoted and unescaped, bare undef becomes None,
    anything else (numbers, references, '...') is kept as trimmed text.
    """
    token = token.strip()
    if token == UNDEF:
        return None
    if not token.startswith("'"):
        return token

    value: list[str] = []
    index = 1
    while index < len(token):
        char = token[index]
        if char == "\\" and index + 1 < len(token) and token[index + 1] in ("'", "\\"):
            value.append(token[index + 1])
            index += 2
            continue
        if char == "'":
            # Carp marks truncated strings with a trailing '...
            return "".join(value) + token[index + 1:]
        value.append(char)
        index += 1

    logger.debug("Unterminated quoted argument: %r", token)
    return "".join(value)


def parse_arguments(arguments_string: str) -> list[str | None]:
    """Parse a raw argument string into an ordered argument list."""
    return [decode_argument(token) for token in split_arguments(arguments_string)]


def parse(raw_trace: str | None) -> list[CallFrame]:
    """Parse a Carp stack trace into an ordered list of CallFrame records.

    Args:
        raw_trace: The multi-line trace text. None or empty yields [].

    Returns:
        Frames in trace order, header frame first when present.
    """
    if not raw_trace:
        return []

    frames: list[CallFrame] = []
    message_lines: list[str] = []
    for raw_line in raw_trace.splitlines():
        if not raw_line.strip():
            continue

        match = CALL_PATTERN.match(raw_line)
        if match:
            args = match.group("args")
            frames.append(
                CallFrame(
                    arguments_string=args,
                    arguments_list=parse_arguments(args) if args is not None else None,
                    line=int(match.group("line")),
                    subroutine=match.group("sub").strip(),
                    file=match.group("file"),
                    raw=raw_line,
                )
            )
            continue

        match = HEADER_PATTERN.match(raw_line)
        if match and not frames:
            message_lines.append(match.group("message"))
            frames.append(
                CallFrame(
                    message="\n".join(message_lines),
                    line=int(match.group("line")),
                    file=match.group("file"),
                    raw=raw_line,
                )
            )
            continue

        if not frames:
            message_lines.append(raw_line)
        logger.debug("Skipping unrecognized trace line: %r", raw_line)

    logger.debug("Parsed %d frames from stack trace", len(frames))
    return frames
