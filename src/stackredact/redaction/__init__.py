"""Redaction of sensitive call arguments in parsed stack traces."""

from stackredact.redaction.redactor import (
    REDACTED_PLACEHOLDER,
    Redactor,
    parse_stack_trace,
    redact,
    redact_arguments,
    redact_frame,
)
from stackredact.redaction.sensitive import (
    DEFAULT_SENSITIVE_ARGUMENT_NAMES,
    SensitiveNameSet,
)

__all__ = [
    "DEFAULT_SENSITIVE_ARGUMENT_NAMES",
    "REDACTED_PLACEHOLDER",
    "Redactor",
    "SensitiveNameSet",
    "parse_stack_trace",
    "redact",
    "redact_arguments",
    "redact_frame",
]
