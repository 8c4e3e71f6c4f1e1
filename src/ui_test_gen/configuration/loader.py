"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ui_test_gen.csv_ingestion import SPLIT_MODES

from .runtime_settings import (
    CompositionSettings,
    CsvSettings,
    EnvironmentSettings,
    GeneratorSettings,
)

REPRESENTATIVE_ROW_POLICIES: tuple[str, ...] = ("first", "all")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_settings(config_path: Path | str | None) -> GeneratorSettings:
    """Load and validate the configuration file; `None` yields the defaults."""
    if config_path is None:
        return GeneratorSettings()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return GeneratorSettings(
        csv=_parse_csv_section(parsed.get("csv")),
        composition=_parse_composition_section(parsed.get("composition")),
        environments=_parse_environments_section(parsed.get("environments")),
        path=path,
    )


def _parse_csv_section(value: Any) -> CsvSettings:
    section = _optional_mapping(value, "csv")
    split_mode = _choice(section.get("split_mode", "naive"), "csv.split_mode", SPLIT_MODES)
    return CsvSettings(split_mode=split_mode)


def _parse_composition_section(value: Any) -> CompositionSettings:
    section = _optional_mapping(value, "composition")
    representative_rows = _choice(
        section.get("representative_rows", "first"),
        "composition.representative_rows",
        REPRESENTATIVE_ROW_POLICIES,
    )
    include_locator_map = _require_bool(
        section.get("include_locator_map", True), "composition.include_locator_map"
    )
    return CompositionSettings(
        representative_rows=representative_rows,
        include_locator_map=include_locator_map,
    )


def _parse_environments_section(value: Any) -> EnvironmentSettings:
    section = _optional_mapping(value, "environments")
    default_environment = _optional_string(section.get("default"), "environments.default")
    screenshot_root = _require_non_empty_string(
        section.get("screenshot_root", "__screenshots__"), "environments.screenshot_root"
    )
    timeout_ms = _require_positive_int(section.get("timeout_ms", 30000), "environments.timeout_ms")
    return EnvironmentSettings(
        default_environment=default_environment,
        screenshot_root=screenshot_root.rstrip("/"),
        timeout_ms=timeout_ms,
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _choice(value: Any, field_name: str, allowed: tuple[str, ...]) -> str:
    text = _require_non_empty_string(value, field_name).lower()
    if text not in allowed:
        options = ", ".join(allowed)
        raise ConfigurationError(f"{field_name} must be one of: {options}.")
    return text


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
