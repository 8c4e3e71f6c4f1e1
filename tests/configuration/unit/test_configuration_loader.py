"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from ui_test_gen.configuration.loader import ConfigurationError, load_settings
from ui_test_gen.configuration.runtime_settings import GeneratorSettings


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_no_path_returns_defaults() -> None:
    settings = load_settings(None)

    assert settings == GeneratorSettings()
    assert settings.csv.split_mode == "naive"
    assert settings.composition.representative_rows == "first"
    assert settings.composition.include_locator_map is True
    assert settings.environments.default_environment is None
    assert settings.environments.screenshot_root == "__screenshots__"
    assert settings.environments.timeout_ms == 30000


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "ui-test-gen.yaml",
        """
csv:
  split_mode: Quoted
composition:
  representative_rows: all
  include_locator_map: false
environments:
  default: int
  screenshot_root: "shots/"
  timeout_ms: 45000
""",
    )

    settings = load_settings(config_path)

    assert settings.path == config_path
    assert settings.csv.split_mode == "quoted"
    assert settings.composition.representative_rows == "all"
    assert settings.composition.include_locator_map is False
    assert settings.environments.default_environment == "int"
    assert settings.environments.screenshot_root == "shots"
    assert settings.environments.timeout_ms == 45000


def test_loads_json_configuration_with_partial_sections(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json", json.dumps({"environments": {"default": "  "}})
    )

    settings = load_settings(config_path)

    assert settings.environments.default_environment is None
    assert settings.csv.split_mode == "naive"


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "empty.yaml", "")

    assert load_settings(config_path).composition == GeneratorSettings().composition


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_settings(tmp_path / "absent.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "broken.yaml", "csv: [unclosed")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_settings(config_path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "list.yaml", "- one\n- two\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_settings(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("csv: naive\n", "'csv' must be a mapping"),
        ("csv:\n  split_mode: excel\n", "csv.split_mode must be one of: naive, quoted"),
        ("composition:\n  representative_rows: 2\n", "must be a string"),
        ("composition:\n  include_locator_map: 'yes'\n", "must be a boolean"),
        ("environments:\n  timeout_ms: 0\n", "must be greater than zero"),
        ("environments:\n  timeout_ms: true\n", "must be an integer"),
        ("environments:\n  screenshot_root: ''\n", "must not be empty"),
        ("environments:\n  default: 3\n", "environments.default must be a string"),
    ],
)
def test_invalid_values_raise(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_settings(config_path)
