"""Configuration error formatting for terminal and CI output.

Human mode prints an annotated snippet of the offending YAML line;
CI mode prints one 'file:line:col -- field: message' line per error.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stackredact.loader.validator import ValidationErrorDetail


# Pydantic / loader error types -> error codes
ERROR_CODES: dict[str, str] = {
    "extra_forbidden": "C001",
    "list_type": "C002",
    "string_type": "C003",
    "type_error": "C004",
    "yaml_syntax_error": "C005",
}

ERROR_DESCRIPTIONS: dict[str, str] = {
    "C001": "unsupported option",
    "C002": "expected a list of names",
    "C003": "sensitive name must be a string",
    "C004": "invalid configuration document",
    "C005": "YAML syntax error",
}


def _is_ci_environment() -> bool:
    return os.environ.get("CI", "").lower() in ("true", "1", "yes")


class ErrorFormatter:
    """Formats configuration errors for humans or CI logs.

    Args:
        ci_mode: Force CI output on or off. None reads the CI
            environment variable.
    """

    def __init__(self, ci_mode: bool | None = None) -> None:
        self.ci_mode = _is_ci_environment() if ci_mode is None else ci_mode

    def error_code(self, error_type: str) -> str:
        return ERROR_CODES.get(error_type, "C999")

    def format_error(
        self,
        error: ValidationErrorDetail,
        source_lines: list[str],
        filename: str,
    ) -> str:
        if self.ci_mode:
            return self._format_ci(error, filename)
        return self._format_annotated(error, source_lines, filename)

    def _format_ci(self, error: ValidationErrorDetail, filename: str) -> str:
        line = error.line if error.line is not None else 0
        col = error.col if error.col is not None else 0
        suggestion_suffix = f" ({error.suggestion})" if error.suggestion else ""
        return f"{filename}:{line}:{col} -- {error.field}: {error.message}{suggestion_suffix}"

    def _format_annotated(
        self,
        error: ValidationErrorDetail,
        source_lines: list[str],
        filename: str,
    ) -> str:
        """Render an error like:

            error[C001]: unsupported option
              --> stackredact.yaml:1:1
               |
             1 | sensitive_names: [token]
               | ^^^^^^^^^^^^^^^ Extra inputs are not permitted
               |
               = help: Did you mean 'sensitive_argument_names'?
        """
        code = self.error_code(error.type)
        description = ERROR_DESCRIPTIONS.get(code, "validation error")
        lines = [f"error[{code}]: {description}"]

        line_idx = error.line - 1 if error.line is not None else -1
        if 0 <= line_idx < len(source_lines):
            col = error.col if error.col is not None else 1
            src_line = source_lines[line_idx].rstrip()
            gutter = str(error.line)
            padding = " " * len(gutter)
            lines.append(f"  --> {filename}:{error.line}:{col}")
            lines.append("   |")
            lines.append(f" {gutter} | {src_line}")

            marker = error.field.split(".")[-1]
            start = src_line.find(marker, max(col - 1, 0)) if marker else -1
            if start < 0:
                start = src_line.find(marker) if marker else -1
            if start >= 0:
                lines.append(f" {padding} | {' ' * start}{'^' * len(marker)} {error.message}")
            else:
                lines.append(f" {padding} | {error.message}")
        else:
            lines.append(f"  --> {filename}")
            lines.append("   |")
            lines.append(f"   | {error.field}: {error.message}")
        lines.append("   |")

        if error.suggestion:
            lines.append(f"   = help: {error.suggestion}")

        return "\n".join(lines)

    def format_all(
        self,
        errors: list[ValidationErrorDetail],
        source: str,
        filename: str,
    ) -> str:
        """Format all errors, separated by blank lines."""
        source_lines = source.splitlines()
        return "\n\n".join(self.format_error(e, source_lines, filename) for e in errors)

    def print_success(self, filename: str) -> None:
        print(f"  {filename} ... valid")
