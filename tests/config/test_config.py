# tests/config/test_config.py
"""
Configuration tests - code defaults, YAML loading, validation
"""

from pathlib import Path

from resultkit import FormatConfig, ResultError, ResultKitConfig, load_config
from resultkit.config import validate_config


def write_yaml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_code_defaults():
    fmt = FormatConfig.default()

    assert fmt.indent_unit == "  "
    assert fmt.newline == "\n"
    assert fmt.escape_mode == "all"
    assert fmt.ensure_ascii is False
    assert validate_config(fmt) == []


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "missing.yml")

    assert config.format == FormatConfig.default()


def test_yaml_overrides_defaults(tmp_path):
    path = write_yaml(tmp_path / "config.yml", 'format:\n  indent_unit: "    "\n  escape_mode: first\n')

    config = load_config(path)

    assert config.format.indent_unit == "    "
    assert config.format.escape_mode == "first"
    assert config.format.newline == "\n"


def test_loaded_config_drives_rendering(tmp_path):
    path = write_yaml(tmp_path / "config.yml", 'format:\n  indent_unit: "    "\n')
    config = load_config(path)

    lines = ResultError("outer", None, "inner").freeze().format(config=config.format)

    assert lines == ["! outer", "    ! inner"]


def test_invalid_yaml_gives_defaults(tmp_path):
    path = write_yaml(tmp_path / "config.yml", "format: [unclosed\n")

    assert load_config(path).format == FormatConfig.default()


def test_non_mapping_yaml_gives_defaults(tmp_path):
    path = write_yaml(tmp_path / "config.yml", "- just\n- a list\n")

    assert load_config(path).format == FormatConfig.default()


def test_invalid_values_fall_back_to_defaults(tmp_path):
    path = write_yaml(tmp_path / "config.yml", "format:\n  escape_mode: sometimes\n")

    assert load_config(path).format == FormatConfig.default()


def test_unknown_keys_are_ignored(tmp_path):
    path = write_yaml(tmp_path / "config.yml", "format:\n  newline: \"\\r\\n\"\n  colour: red\n")

    config = load_config(path)

    assert config.format.newline == "\r\n"


def test_to_dict():
    assert ResultKitConfig.default().to_dict() == {
        "format": {
            "indent_unit": "  ",
            "newline": "\n",
            "escape_mode": "all",
            "ensure_ascii": False,
        }
    }


class TestValidateConfig:

    def test_unknown_escape_mode(self):
        issues = validate_config(FormatConfig(escape_mode="sometimes"))

        assert [(i.level, i.path) for i in issues] == [("error", "format.escape_mode")]

    def test_non_whitespace_indent(self):
        issues = validate_config(FormatConfig(indent_unit="--"))

        assert [(i.level, i.path) for i in issues] == [("error", "format.indent_unit")]

    def test_empty_indent_warns(self):
        issues = validate_config(FormatConfig(indent_unit=""))

        assert [(i.level, i.path) for i in issues] == [("warn", "format.indent_unit")]

    def test_empty_newline(self):
        issues = validate_config(FormatConfig(newline=""))

        assert [(i.level, i.path) for i in issues] == [("error", "format.newline")]

    def test_first_escape_mode_warns(self):
        issues = validate_config(FormatConfig(escape_mode="first"))

        assert [(i.level, i.path) for i in issues] == [("warn", "format.escape_mode")]
        assert "Hint:" in str(issues[0])
