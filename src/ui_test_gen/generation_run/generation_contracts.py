"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from ui_test_gen.configuration.runtime_settings import GeneratorSettings
from ui_test_gen.csv_ingestion.table_models import ParsedTable
from ui_test_gen.environment_table import EnvironmentEntry
from ui_test_gen.feature_detection import FeatureFlags
from ui_test_gen.locator_mapping import LocatorGroup


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    csv_data: str
    settings: GeneratorSettings = field(default_factory=GeneratorSettings)


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    text: str
    table: ParsedTable
    flags: FeatureFlags
    environments: tuple[EnvironmentEntry, ...]
    locator_groups: tuple[LocatorGroup, ...]
    included_fragments: tuple[str, ...]
