"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import REPRESENTATIVE_ROW_POLICIES, ConfigurationError, load_settings
from .runtime_settings import (
    CompositionSettings,
    CsvSettings,
    EnvironmentSettings,
    GeneratorSettings,
)

__all__ = [
    "CompositionSettings",
    "CsvSettings",
    "EnvironmentSettings",
    "GeneratorSettings",
    "ConfigurationError",
    "load_settings",
    "REPRESENTATIVE_ROW_POLICIES",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
