"""Tests for stackredact.models.config - options, ProjectConfig, config loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from stackredact.models.config import (
    InvalidConfiguration,
    ProjectConfig,
    RedactionOptions,
    find_project_root,
    load_config_file,
    load_project_config,
    validate_options,
)


class TestRedactionOptions:
    """Test the RedactionOptions model."""

    def test_defaults(self):
        assert RedactionOptions().sensitive_argument_names is None

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError, match="extra_forbidden"):
            RedactionOptions.model_validate({"unknown_field": True})

    def test_rejects_non_string_items(self):
        with pytest.raises(ValidationError):
            RedactionOptions.model_validate({"sensitive_argument_names": [1, 2]})


class TestValidateOptions:
    """Test validate_options error mapping."""

    def test_valid_names(self):
        options = validate_options({"sensitive_argument_names": ["token", "pin"]})
        assert options.sensitive_argument_names == ["token", "pin"]

    def test_none_names(self):
        assert validate_options({"sensitive_argument_names": None}).sensitive_argument_names is None

    def test_string_names_rejected(self):
        with pytest.raises(InvalidConfiguration, match="sequence of strings"):
            validate_options({"sensitive_argument_names": "token"})

    def test_unknown_key_listed_in_message(self):
        with pytest.raises(InvalidConfiguration) as exc_info:
            validate_options({"redact_all": True})
        assert "redact_all" in str(exc_info.value)
        assert exc_info.value.errors[0]["type"] == "extra_forbidden"

    def test_bad_item_reports_position(self):
        with pytest.raises(InvalidConfiguration, match=r"sensitive_argument_names\.1"):
            validate_options({"sensitive_argument_names": ["ok", 5]})


class TestFindProjectRoot:
    def test_finds_config_in_parent(self, tmp_path: Path):
        (tmp_path / "stackredact.yaml").write_text("sensitive_argument_names: [token]\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == tmp_path.resolve()

    def test_falls_back_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert find_project_root(tmp_path) == Path.cwd()


class TestLoadProjectConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_project_config(tmp_path)
        assert config == ProjectConfig()
        assert config.sensitive_argument_names is None

    def test_loads_names(self, tmp_path: Path):
        (tmp_path / "stackredact.yaml").write_text(
            "sensitive_argument_names:\n  - token\n  - pin\n"
        )
        config = load_project_config(tmp_path)
        assert config.sensitive_argument_names == ["token", "pin"]

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        (tmp_path / "stackredact.yaml").write_text("# nothing here\n")
        assert load_project_config(tmp_path) == ProjectConfig()

    def test_unknown_key_raises(self, tmp_path: Path):
        (tmp_path / "stackredact.yaml").write_text("sensitive_names: [token]\n")
        with pytest.raises(InvalidConfiguration, match="sensitive_names"):
            load_project_config(tmp_path)

    def test_string_names_raise(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        path.write_text("sensitive_argument_names: token\n")
        with pytest.raises(InvalidConfiguration):
            load_config_file(path)

    def test_non_mapping_document_raises(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        path.write_text("- token\n- pin\n")
        with pytest.raises(InvalidConfiguration, match="mapping"):
            load_config_file(path)

    def test_yaml_syntax_error_raises(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        path.write_text("sensitive_argument_names: [token\n")
        with pytest.raises(InvalidConfiguration, match="invalid YAML"):
            load_config_file(path)

    def test_project_yaml_syntax_error_raises(self, tmp_path: Path):
        (tmp_path / "stackredact.yaml").write_text("sensitive_argument_names: [token\n")
        with pytest.raises(InvalidConfiguration, match=r"stackredact.yaml:\d+:\d+"):
            load_project_config(tmp_path)
