"""stackredact - parse Carp stack traces and redact sensitive arguments."""

from stackredact.models.config import InvalidConfiguration
from stackredact.models.frame import CallFrame, RedactedCallFrame
from stackredact.parser.carp import parse
from stackredact.redaction.redactor import (
    REDACTED_PLACEHOLDER,
    Redactor,
    parse_stack_trace,
    redact,
    redact_frame,
)
from stackredact.redaction.sensitive import (
    DEFAULT_SENSITIVE_ARGUMENT_NAMES,
    SensitiveNameSet,
)

__version__ = "1.0.1"

__all__ = [
    "CallFrame",
    "DEFAULT_SENSITIVE_ARGUMENT_NAMES",
    "InvalidConfiguration",
    "REDACTED_PLACEHOLDER",
    "RedactedCallFrame",
    "Redactor",
    "SensitiveNameSet",
    "__version__",
    "parse",
    "parse_stack_trace",
    "redact",
    "redact_frame",
]
