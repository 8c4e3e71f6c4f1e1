"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CsvSettings:
    """How raw tabular text is split into fields."""

    split_mode: str = "naive"


@dataclass(frozen=True)
class CompositionSettings:
    """Which optional sections the composer renders."""

    representative_rows: str = "first"
    include_locator_map: bool = True


@dataclass(frozen=True)
class EnvironmentSettings:
    """Defaults applied to generated environment configuration code."""

    default_environment: str | None = None
    screenshot_root: str = "__screenshots__"
    timeout_ms: int = 30000


@dataclass(frozen=True)
class GeneratorSettings:
    """Top-level configuration aggregate."""

    csv: CsvSettings = field(default_factory=CsvSettings)
    composition: CompositionSettings = field(default_factory=CompositionSettings)
    environments: EnvironmentSettings = field(default_factory=EnvironmentSettings)
    path: Path | None = None
