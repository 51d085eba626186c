"""stackredact config loader - YAML parsing, validation, and error reporting."""

from stackredact.loader.errors import ErrorFormatter
from stackredact.loader.validator import (
    ValidationErrorDetail,
    validate_config,
    validate_config_file,
    validate_config_string,
)
from stackredact.loader.yaml_parser import (
    YAMLParseError,
    parse_yaml_file,
    parse_yaml_with_lines,
)

__all__ = [
    "ErrorFormatter",
    "ValidationErrorDetail",
    "YAMLParseError",
    "parse_yaml_file",
    "parse_yaml_with_lines",
    "validate_config",
    "validate_config_file",
    "validate_config_string",
]
