"""Redaction options and project configuration for stackredact.

Options are validated by Pydantic before any parsing or redaction
work begins. The same option set can be loaded from a project-level
stackredact.yaml file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, StrictStr, ValidationError

CONFIG_FILENAME = "stackredact.yaml"


class InvalidConfiguration(ValueError):
    """Raised when redaction options are malformed or unrecognized.

    Attributes:
        errors: Pydantic error dicts when the failure came from model
            validation, otherwise an empty list.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)


class RedactionOptions(BaseModel):
    """Options accepted by redact() and parse_stack_trace().

    sensitive_argument_names replaces the default name set entirely
    when supplied. Unknown keys are rejected.
    """

    model_config = {"extra": "forbid", "frozen": True}

    sensitive_argument_names: list[StrictStr] | None = None


class ProjectConfig(RedactionOptions):
    """Project-level configuration loaded from stackredact.yaml."""


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<options>"
        if err.get("type") == "extra_forbidden":
            parts.append(f"unsupported option {loc!r}")
        else:
            parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def validate_options(options: dict[str, Any]) -> RedactionOptions:
    """Validate a raw options mapping into RedactionOptions.

    Args:
        options: Keyword options as passed by the caller.

    Returns:
        The validated RedactionOptions.

    Raises:
        InvalidConfiguration: If an option is malformed or unsupported.
    """
    # A bare string is a sequence of characters in Python; reject it
    # explicitly so it never reaches list coercion.
    names = options.get("sensitive_argument_names")
    if isinstance(names, (str, bytes)):
        raise InvalidConfiguration(
            "'sensitive_argument_names' must be a sequence of strings, "
            f"got {type(names).__name__}"
        )
    try:
        return RedactionOptions.model_validate(options)
    except ValidationError as e:
        raise InvalidConfiguration(
            f"Invalid redaction options: {_describe_errors(e)}",
            errors=e.errors(),
        ) from e


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from start (default: cwd) looking for stackredact.yaml.

    Returns:
        The directory containing stackredact.yaml, or cwd if none is found.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while current != current.parent:
        if (current / CONFIG_FILENAME).exists():
            return current
        current = current.parent
    return Path.cwd()


def load_project_config(project_root: Path | None = None) -> ProjectConfig:
    """Load ProjectConfig from stackredact.yaml. Returns defaults if not found.

    Args:
        project_root: Directory holding stackredact.yaml. If None,
            uses find_project_root() to locate it.

    Raises:
        InvalidConfiguration: If the file content fails validation.
    """
    if project_root is None:
        project_root = find_project_root()
    config_path = project_root / CONFIG_FILENAME
    if not config_path.is_file():
        return ProjectConfig()
    return load_config_file(config_path)


def load_config_file(config_path: Path) -> ProjectConfig:
    """Load and validate a specific configuration file.

    Raises:
        InvalidConfiguration: If the YAML is malformed, is not a mapping,
            or fails validation.
    """
    from stackredact.loader.yaml_parser import YAMLParseError, parse_yaml_file

    try:
        raw, _ = parse_yaml_file(config_path)
    except YAMLParseError as e:
        position = f":{e.line}:{e.column}" if e.line is not None else ""
        raise InvalidConfiguration(
            f"{config_path}{position}: invalid YAML: {e.message}"
        ) from e
    if raw is None:
        return ProjectConfig()
    if not isinstance(raw, dict):
        raise InvalidConfiguration(
            f"{config_path}: top-level YAML must be a mapping, got {type(raw).__name__}"
        )
    names = raw.get("sensitive_argument_names")
    if isinstance(names, str):
        raise InvalidConfiguration(
            f"{config_path}: 'sensitive_argument_names' must be a list of strings"
        )
    try:
        return ProjectConfig.model_validate(raw)
    except ValidationError as e:
        raise InvalidConfiguration(
            f"{config_path}: {_describe_errors(e)}",
            errors=e.errors(),
        ) from e
