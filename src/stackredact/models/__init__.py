"""stackredact data models - re-exports all public model classes."""

from stackredact.models.config import (
    InvalidConfiguration,
    ProjectConfig,
    RedactionOptions,
    validate_options,
)
from stackredact.models.frame import CallFrame, RedactedCallFrame

__all__ = [
    "CallFrame",
    "InvalidConfiguration",
    "ProjectConfig",
    "RedactedCallFrame",
    "RedactionOptions",
    "validate_options",
]
