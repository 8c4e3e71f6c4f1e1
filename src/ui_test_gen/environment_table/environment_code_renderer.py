"""Environment configuration code rendering."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ui_test_gen.configuration.runtime_settings import EnvironmentSettings

from .environment_entries import ENVIRONMENT_NAME_PATTERN, EnvironmentEntry

logger = logging.getLogger(__name__)


def render_environment_table(
    entries: Sequence[EnvironmentEntry], settings: EnvironmentSettings
) -> str:
    """Render the environment mapping in entry order."""
    lines = [
        "export interface EnvConfig {",
        "\tbaseUrl: string;",
        "\tscreenshotDir: string;",
        "\ttimeout: number;",
        "}",
        "",
        "export const ENVIRONMENTS: Record<string, EnvConfig> = {",
    ]
    for entry in entries:
        screenshot_dir = f"{settings.screenshot_root}/{entry.name}"
        lines.append(
            f"\t{json.dumps(entry.name)}: {{ "
            f"baseUrl: {json.dumps(entry.base_url)}, "
            f"screenshotDir: {json.dumps(screenshot_dir)}, "
            f"timeout: {settings.timeout_ms} }},"
        )
    lines.append("};")
    return "\n".join(lines) + "\n"


def render_environment_switch(
    entries: Sequence[EnvironmentEntry], settings: EnvironmentSettings
) -> str:
    """Render the function that resolves the active environment from `ENV`."""
    default_name = resolve_default_environment(entries, settings)
    pattern = ENVIRONMENT_NAME_PATTERN.pattern
    return (
        f"export const DEFAULT_ENV = {json.dumps(default_name)};\n"
        "\n"
        "export function switchEnvironment(\n"
        "\tenv: string = process.env.ENV || DEFAULT_ENV\n"
        "): EnvConfig {\n"
        f"\tif (!/{pattern}/.test(env)) {{\n"
        "\t\tthrow new Error(`Invalid environment name: ${env}. Environment names must be "
        "alphanumeric and can contain hyphens.`);\n"
        "\t}\n"
        "\tconst config = ENVIRONMENTS[env];\n"
        "\tif (!config) {\n"
        "\t\tthrow new Error(`Unknown environment: ${env}. Known environments: "
        "${Object.keys(ENVIRONMENTS).join(\", \")}`);\n"
        "\t}\n"
        "\treturn config;\n"
        "}\n"
    )


def resolve_default_environment(
    entries: Sequence[EnvironmentEntry], settings: EnvironmentSettings
) -> str:
    """Pick the configured default when it is known, else the first-seen environment."""
    names = [entry.name for entry in entries]
    configured = settings.default_environment
    if configured and configured in names:
        return configured
    if configured:
        logger.warning(
            "Configured default environment '%s' is not in the table; using '%s'.",
            configured,
            names[0] if names else "",
        )
    return names[0] if names else ""
