"""Redaction of sensitive argument values in parsed stack traces.

Walks each frame's argument list in order and masks the value that
immediately follows a sensitive argument name, relying on the
name, value, name, value convention of Perl named arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from stackredact.models.config import validate_options
from stackredact.models.frame import CallFrame, RedactedCallFrame
from stackredact.parser.carp import parse
from stackredact.redaction.sensitive import SensitiveNameSet

logger = logging.getLogger(__name__)

REDACTED_PLACEHOLDER = "[redacted]"

_PASSTHROUGH_FIELDS = (
    "message",
    "arguments_string",
    "arguments_list",
    "line",
    "subroutine",
    "file",
)


def _frame_field(frame: Any, name: str) -> Any:
    if isinstance(frame, Mapping):
        return frame.get(name)
    return getattr(frame, name, None)


def redact_arguments(
    arguments: Sequence[str | None] | None,
    names: SensitiveNameSet,
) -> list[str | None]:
    """Mask every value that directly follows a sensitive name.

    The value after a sensitive name is replaced whatever it holds,
    so it is never itself checked as a name. A sensitive name in last
    position has no effect.

    Args:
        arguments: Ordered argument values. None or a non-sequence is
            treated as empty.
        names: Sensitive argument names.

    Returns:
        A new list of the same length as arguments.
    """
    if arguments is None or isinstance(arguments, (str, bytes)) or not isinstance(
        arguments, Sequence
    ):
        return []

    redacted: list[str | None] = []
    mask_next = False
    for argument in arguments:
        if mask_next:
            redacted.append(REDACTED_PLACEHOLDER)
            mask_next = False
        else:
            redacted.append(argument)
            mask_next = names.is_sensitive(argument)
    return redacted


def redact_frame(frame: CallFrame | Any, names: SensitiveNameSet) -> RedactedCallFrame:
    """Build the RedactedCallFrame for a single call frame.

    The input frame's fields are passed through by reference, never
    copied or modified.
    """
    fields = {name: _frame_field(frame, name) for name in _PASSTHROUGH_FIELDS}
    fields["redacted_arguments_list"] = redact_arguments(fields["arguments_list"], names)
    return RedactedCallFrame.model_construct(**fields)


class Redactor:
    """Redacts stack traces with one validated set of options.

    Options are checked once at construction; the instance holds no
    mutable state and can be reused or shared between threads.

    Args:
        sensitive_argument_names: Names replacing the default set.
        **options: Any other option raises InvalidConfiguration.

    Raises:
        InvalidConfiguration: If an option is malformed or unsupported.
    """

    def __init__(
        self,
        sensitive_argument_names: Sequence[str] | None = None,
        **options: Any,
    ) -> None:
        validated = validate_options(
            {"sensitive_argument_names": sensitive_argument_names, **options}
        )
        self.names = SensitiveNameSet(validated.sensitive_argument_names)

    def redact(self, call_frames: Iterable[CallFrame | Any] | None) -> list[RedactedCallFrame]:
        """Redact every frame, preserving frame order."""
        redacted = [redact_frame(frame, self.names) for frame in call_frames or []]
        if logger.isEnabledFor(logging.DEBUG):
            masked = sum(
                1
                for frame in redacted
                for value in frame.redacted_arguments_list
                if value == REDACTED_PLACEHOLDER
            )
            logger.debug("Redacted %d argument values across %d frames", masked, len(redacted))
        return redacted

    def parse_stack_trace(self, stack_trace: str | None) -> list[RedactedCallFrame]:
        """Parse a Carp stack trace and redact each frame's arguments."""
        return self.redact(parse(stack_trace))


def redact(
    call_frames: Iterable[CallFrame | Any] | None,
    sensitive_argument_names: Sequence[str] | None = None,
    **options: Any,
) -> list[RedactedCallFrame]:
    """Redact sensitive argument values in already-parsed call frames.

    Args:
        call_frames: Ordered frames exposing arguments_string,
            arguments_list and line.
        sensitive_argument_names: Optional names replacing the defaults.
        **options: Unsupported; any key raises InvalidConfiguration.

    Returns:
        One RedactedCallFrame per input frame, in the same order.

    Raises:
        InvalidConfiguration: If the options are malformed, before any
            frame is processed.
    """
    return Redactor(sensitive_argument_names, **options).redact(call_frames)


def parse_stack_trace(
    stack_trace: str | None,
    sensitive_argument_names: Sequence[str] | None = None,
    **options: Any,
) -> list[RedactedCallFrame]:
    """Parse a Carp stack trace into redacted call frames.

    Options are validated before the trace is parsed, so a bad option
    fails even for an empty trace.
    """
    return Redactor(sensitive_argument_names, **options).parse_stack_trace(stack_trace)
