"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "ui-test-gen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration template for ui-test-gen.
# Every key is optional; remove a line to fall back to its default.

csv:
  # naive: split every line on commas by position (quoted commas split too).
  # quoted: honour standard CSV quoting, e.g. "a, b" stays one field.
  split_mode: "naive"

composition:
  # first: render the worked example from the first data row only.
  # all: render one worked example per data row.
  representative_rows: "first"
  # Emit one page-object locator class per file_name group.
  include_locator_map: true

environments:
  # Environment used when ENV is unset; empty means the first test_env seen.
  default: ""
  # Screenshots for environment <env> are stored under <screenshot_root>/<env>.
  screenshot_root: "__screenshots__"
  timeout_ms: 30000
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the generator configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
