"""Configuration validation combining YAML parsing with Pydantic validation.

Two-stage validation: parse YAML with line tracking, then validate
against the ProjectConfig model. Errors from both stages carry source
positions and are collected for batch reporting.
"""

from __future__ import annotations

import difflib
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from stackredact.loader.yaml_parser import (
    YAMLParseError,
    parse_yaml_file,
    parse_yaml_with_lines,
)
from stackredact.models.config import ProjectConfig

VALID_CONFIG_FIELDS: list[str] = list(ProjectConfig.model_fields.keys())


@dataclass
class ValidationErrorDetail:
    """A single validation error with source position and context.

    Attributes:
        field: The field name or dotted path that caused the error.
        message: Human-readable error description.
        type: Pydantic error type string (e.g. 'list_type', 'extra_forbidden').
        line: 1-indexed line number in the source YAML, or None if unknown.
        col: 1-indexed column number in the source YAML, or None if unknown.
        suggestion: 'Did you mean X?' suggestion for typos, or None.
        input_value: The invalid input value, if available.
    """

    field: str
    message: str
    type: str
    line: int | None = None
    col: int | None = None
    suggestion: str | None = None
    input_value: Any = field(default=None)


def _loc_to_field_path(loc: tuple[str | int, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _find_line_for_field(
    field_path: str,
    line_map: dict[str, tuple[int, int]],
) -> tuple[int | None, int | None]:
    """Look up a field path, falling back to progressively shorter prefixes."""
    parts = field_path.split(".")
    while parts:
        prefix = ".".join(parts)
        if prefix in line_map:
            return line_map[prefix]
        parts.pop()
    return None, None


def _get_suggestion(field_name: str) -> str | None:
    matches = difflib.get_close_matches(field_name, VALID_CONFIG_FIELDS, n=1, cutoff=0.6)
    if matches:
        return f"Did you mean '{matches[0]}'?"
    return None


def validate_config(
    raw_data: Any,
    line_map: dict[str, tuple[int, int]],
) -> tuple[ProjectConfig | None, list[ValidationErrorDetail]]:
    """Validate parsed YAML data against the ProjectConfig model.

    Returns:
        Tuple of (ProjectConfig, []) on success, or (None, errors) on failure.
    """
    if not isinstance(raw_data, dict):
        return None, [
            ValidationErrorDetail(
                field="<yaml>",
                message=f"Top-level value must be a mapping, got {type(raw_data).__name__}",
                type="type_error",
                line=1,
                col=1,
            )
        ]

    try:
        return ProjectConfig.model_validate(raw_data), []
    except ValidationError as e:
        errors: list[ValidationErrorDetail] = []
        for err in e.errors():
            loc = err.get("loc", ())
            field_path = _loc_to_field_path(loc)
            error_type = err.get("type", "unknown")
            line, col = _find_line_for_field(field_path, line_map)

            suggestion = None
            if error_type == "extra_forbidden":
                suggestion = _get_suggestion(str(loc[0]) if loc else field_path)

            errors.append(
                ValidationErrorDetail(
                    field=field_path,
                    message=err.get("msg", "Validation error"),
                    type=error_type,
                    line=line,
                    col=col,
                    suggestion=suggestion,
                    input_value=err.get("input"),
                )
            )
        return None, errors


def _validate_source(
    parse: Callable[[], tuple[Any, dict[str, tuple[int, int]]]],
) -> tuple[ProjectConfig | None, list[ValidationErrorDetail]]:
    try:
        raw_data, line_map = parse()
    except YAMLParseError as e:
        return None, [
            ValidationErrorDetail(
                field="<yaml>",
                message=e.message,
                type="yaml_syntax_error",
                line=e.line,
                col=e.column,
            )
        ]

    if raw_data is None:
        # An empty config is valid and means "all defaults"
        return ProjectConfig(), []

    return validate_config(raw_data, line_map)


def validate_config_file(
    filepath: Path,
) -> tuple[ProjectConfig | None, list[ValidationErrorDetail]]:
    """Validate a stackredact.yaml file, returning all errors at once."""
    return _validate_source(lambda: parse_yaml_file(filepath))


def validate_config_string(
    source: str,
    filename: str = "<string>",
) -> tuple[ProjectConfig | None, list[ValidationErrorDetail]]:
    """Validate configuration from a YAML string."""
    return _validate_source(
        lambda: parse_yaml_with_lines(source, filename=filename)
    )
