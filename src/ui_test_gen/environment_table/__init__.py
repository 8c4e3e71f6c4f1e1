"""Environment table exports."""

from .environment_code_renderer import (
    render_environment_switch,
    render_environment_table,
    resolve_default_environment,
)
from .environment_entries import EnvironmentEntry, build_environments, is_valid_environment_name

__all__ = [
    "EnvironmentEntry",
    "build_environments",
    "is_valid_environment_name",
    "render_environment_switch",
    "render_environment_table",
    "resolve_default_environment",
]
