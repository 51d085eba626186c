"""YAML parser with line tracking for configuration error reporting.

A PyYAML SafeLoader subclass records the source position of every
mapping key and sequence item, so validation errors on
stackredact.yaml can point at the offending line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


class YAMLParseError(Exception):
    """Raised when YAML syntax cannot be parsed.

    Attributes:
        line: 1-indexed line number where the error occurred.
        column: 1-indexed column number where the error occurred.
        message: Human-readable description of the syntax error.
        filename: Name of the file being parsed, or '<string>'.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        filename: str = "<string>",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(message)


class LineTrackingLoader(yaml.SafeLoader):
    """SafeLoader that maps dotted key paths to (line, column), 1-indexed.

    Sequence items are recorded by index, e.g.
    'sensitive_argument_names.2'.
    """

    def __init__(self, stream: str) -> None:
        super().__init__(stream)
        self.line_map: dict[str, tuple[int, int]] = {}
        self._prefix_stack: list[str] = []

    def _record(self, key: str, node: yaml.Node) -> None:
        if node.start_mark is None:
            return
        full_key = ".".join([*self._prefix_stack, key])
        self.line_map[full_key] = (node.start_mark.line + 1, node.start_mark.column + 1)

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        self.flatten_mapping(node)
        pairs = []
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)

            if isinstance(key, str):
                self._record(key, key_node)

            # Nested collections get the key as path prefix
            if isinstance(key, str) and isinstance(
                value_node, (yaml.MappingNode, yaml.SequenceNode)
            ):
                self._prefix_stack.append(key)
                value = self.construct_object(value_node, deep=deep)
                self._prefix_stack.pop()
            else:
                value = self.construct_object(value_node, deep=deep)

            pairs.append((key, value))

        return dict(pairs)

    def construct_sequence(self, node: yaml.SequenceNode, deep: bool = False) -> list[Any]:
        result = []
        for idx, child_node in enumerate(node.value):
            self._record(str(idx), child_node)
            if isinstance(child_node, (yaml.MappingNode, yaml.SequenceNode)):
                self._prefix_stack.append(str(idx))
                result.append(self.construct_object(child_node, deep=deep))
                self._prefix_stack.pop()
            else:
                result.append(self.construct_object(child_node, deep=deep))
        return result

    def construct_yaml_map(self, node: yaml.MappingNode) -> Any:
        data = self.construct_mapping(node, deep=True)
        yield data

    def construct_yaml_seq(self, node: yaml.SequenceNode) -> Any:
        data = self.construct_sequence(node, deep=True)
        yield data


LineTrackingLoader.add_constructor(
    "tag:yaml.org,2002:map",
    LineTrackingLoader.construct_yaml_map,
)

LineTrackingLoader.add_constructor(
    "tag:yaml.org,2002:seq",
    LineTrackingLoader.construct_yaml_seq,
)


def parse_yaml_with_lines(
    source: str,
    filename: str = "<string>",
) -> tuple[Any, dict[str, tuple[int, int]]]:
    """Parse a YAML string and return (data, line_map).

    Args:
        source: YAML content as a string.
        filename: Filename for error messages.

    Returns:
        A tuple of (parsed_data, line_map). parsed_data is whatever
        the document holds (None for empty or comment-only YAML).

    Raises:
        YAMLParseError: If the YAML contains syntax errors.
    """
    try:
        loader = LineTrackingLoader(source)
        try:
            data = loader.get_single_data()
        finally:
            loader.dispose()
    except yaml.YAMLError as e:
        line = None
        column = None
        if hasattr(e, "problem_mark") and e.problem_mark is not None:
            line = e.problem_mark.line + 1
            column = e.problem_mark.column + 1
        raise YAMLParseError(
            message=str(e),
            line=line,
            column=column,
            filename=filename,
        ) from e

    return data, loader.line_map


def parse_yaml_file(filepath: Path) -> tuple[Any, dict[str, tuple[int, int]]]:
    """Parse a YAML file and return (data, line_map).

    Raises:
        YAMLParseError: If the file contains YAML syntax errors.
        FileNotFoundError: If the file does not exist.
    """
    content = filepath.read_text(encoding="utf-8")
    return parse_yaml_with_lines(content, filename=str(filepath))
