"""Tests for config YAML parsing, validation, and error formatting."""

from pathlib import Path

import pytest

from stackredact.loader import (
    ErrorFormatter,
    ValidationErrorDetail,
    YAMLParseError,
    parse_yaml_with_lines,
    validate_config_file,
    validate_config_string,
)


class TestParseYamlWithLines:
    """Tests for parse_yaml_with_lines."""

    def test_returns_data_and_line_map(self):
        source = "sensitive_argument_names:\n  - token\n  - pin\n"
        data, line_map = parse_yaml_with_lines(source)
        assert data == {"sensitive_argument_names": ["token", "pin"]}
        assert line_map["sensitive_argument_names"] == (1, 1)

    def test_tracks_sequence_items(self):
        """Scalar list items are recorded by index."""
        source = "sensitive_argument_names:\n  - token\n  - pin\n"
        _, line_map = parse_yaml_with_lines(source)
        assert line_map["sensitive_argument_names.0"][0] == 2
        assert line_map["sensitive_argument_names.1"][0] == 3

    def test_syntax_error_has_position(self):
        with pytest.raises(YAMLParseError) as exc_info:
            parse_yaml_with_lines("sensitive_argument_names: [token\n")
        assert exc_info.value.line is not None
        assert exc_info.value.column is not None

    def test_empty_document(self):
        data, line_map = parse_yaml_with_lines("# only a comment\n")
        assert data is None
        assert line_map == {}


class TestValidateConfig:
    """Tests for config validation with source positions."""

    def test_valid_config(self):
        config, errors = validate_config_string("sensitive_argument_names: [token]\n")
        assert errors == []
        assert config.sensitive_argument_names == ["token"]

    def test_empty_config_is_valid(self):
        config, errors = validate_config_string("")
        assert errors == []
        assert config.sensitive_argument_names is None

    def test_unknown_key_with_suggestion(self):
        config, errors = validate_config_string("sensitive_argument_name: [token]\n")
        assert config is None
        assert len(errors) == 1
        assert errors[0].type == "extra_forbidden"
        assert errors[0].line == 1
        assert errors[0].suggestion == "Did you mean 'sensitive_argument_names'?"

    def test_string_instead_of_list(self):
        config, errors = validate_config_string("sensitive_argument_names: token\n")
        assert config is None
        assert errors[0].type == "list_type"
        assert errors[0].line == 1

    def test_non_string_item_points_at_item_line(self):
        source = "sensitive_argument_names:\n  - token\n  - 42\n"
        _, errors = validate_config_string(source)
        assert errors[0].field == "sensitive_argument_names.1"
        assert errors[0].line == 3

    def test_top_level_list_rejected(self):
        config, errors = validate_config_string("- token\n")
        assert config is None
        assert errors[0].type == "type_error"

    def test_syntax_error_reported(self):
        _, errors = validate_config_string("sensitive_argument_names: [token\n")
        assert errors[0].type == "yaml_syntax_error"

    def test_validate_file(self, tmp_path: Path):
        path = tmp_path / "stackredact.yaml"
        path.write_text("sensitive_argument_names: [pin]\n")
        config, errors = validate_config_file(path)
        assert errors == []
        assert config.sensitive_argument_names == ["pin"]


class TestErrorFormatter:
    """Tests for annotated and CI error formatting."""

    ERROR = ValidationErrorDetail(
        field="sensitive_names",
        message="Extra inputs are not permitted",
        type="extra_forbidden",
        line=1,
        col=1,
        suggestion="Did you mean 'sensitive_argument_names'?",
    )

    def test_annotated_format(self):
        formatter = ErrorFormatter(ci_mode=False)
        result = formatter.format_error(self.ERROR, ["sensitive_names: [token]"], "stackredact.yaml")
        assert "error[C001]: unsupported option" in result
        assert "--> stackredact.yaml:1:1" in result
        assert "^^^^^^^^^^^^^^^ Extra inputs are not permitted" in result
        assert "= help: Did you mean 'sensitive_argument_names'?" in result

    def test_ci_format(self):
        formatter = ErrorFormatter(ci_mode=True)
        result = formatter.format_error(self.ERROR, [], "stackredact.yaml")
        assert result == (
            "stackredact.yaml:1:1 -- sensitive_names: Extra inputs are not permitted "
            "(Did you mean 'sensitive_argument_names'?)"
        )

    def test_missing_line_number(self):
        error = ValidationErrorDetail(field="<yaml>", message="bad", type="type_error")
        result = ErrorFormatter(ci_mode=False).format_error(error, [], "c.yaml")
        assert "error[C004]" in result
        assert "<yaml>: bad" in result

    def test_ci_mode_from_environment(self, monkeypatch):
        monkeypatch.setenv("CI", "true")
        assert ErrorFormatter().ci_mode is True
        monkeypatch.setenv("CI", "")
        assert ErrorFormatter().ci_mode is False

    def test_format_all_joins_errors(self):
        formatter = ErrorFormatter(ci_mode=True)
        output = formatter.format_all([self.ERROR, self.ERROR], "sensitive_names: x\n", "c.yaml")
        assert output.count("c.yaml:1:1") == 2
