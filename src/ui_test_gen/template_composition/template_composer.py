"""Template composer assembling the generated instruction text.

The output is a fixed sequence of sections. Each section, and each fragment
of the core test script inside it, is gated by a feature flag or a setting
and concatenated in the order declared below:

1. preamble echoing the raw input
2. core test script template (import, header, [hide], [action], locator,
   [text filter], screenshot assertion)
3. worked example(s) rendered from the representative row(s)
4. [environment table, environment switch]
5. [page-object locator map]
6. closing placeholder and rules section
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ui_test_gen.configuration.runtime_settings import GeneratorSettings
from ui_test_gen.csv_ingestion.table_models import (
    TEST_ACTION_COLUMN,
    TEST_HIDE_COLUMN,
    TEST_SELECTOR_TEXT_COLUMN,
    ParsedTable,
    TestCaseRow,
)
from ui_test_gen.environment_table import (
    EnvironmentEntry,
    render_environment_switch,
    render_environment_table,
)
from ui_test_gen.feature_detection import FeatureFlags
from ui_test_gen.identifier_synthesis import spec_file_name
from ui_test_gen.locator_mapping import LocatorGroup, render_page_object

from . import fragments
from .placeholder_substitution import substitute_placeholders
from .representative_rows import select_representative_rows

logger = logging.getLogger(__name__)

# (fragment name, feature flag attribute gating it or None when always included)
CORE_TEMPLATE_ORDER: tuple[tuple[str, str | None], ...] = (
    (fragments.MODULE_IMPORT, None),
    (fragments.TEST_HEADER, None),
    (fragments.HIDE_ELEMENTS, "has_hide_selectors"),
    (fragments.EXECUTE_ACTION, "has_test_actions"),
    (fragments.ELEMENT_LOCATOR, None),
    (fragments.TEXT_FILTER, "has_selector_text"),
    (fragments.SCREENSHOT_ASSERTION, None),
)

# Row columns whose emptiness suppresses a fragment in that row's worked example.
ROW_GATED_FRAGMENTS: dict[str, str] = {
    fragments.HIDE_ELEMENTS: TEST_HIDE_COLUMN,
    fragments.EXECUTE_ACTION: TEST_ACTION_COLUMN,
    fragments.TEXT_FILTER: TEST_SELECTOR_TEXT_COLUMN,
}


@dataclass(frozen=True)
class CompositionResult:
    """Composed text plus the names of the sections and fragments it includes."""

    text: str
    included_fragments: tuple[str, ...]


def compose(
    table: ParsedTable,
    flags: FeatureFlags,
    environments: Sequence[EnvironmentEntry],
    locator_groups: Sequence[LocatorGroup],
    *,
    representative_rows: Sequence[TestCaseRow] | None = None,
    settings: GeneratorSettings | None = None,
) -> CompositionResult:
    """Assemble the final text from fixed and conditionally included fragments."""
    resolved_settings = settings or GeneratorSettings()
    if representative_rows is None:
        representative_rows = select_representative_rows(
            table, resolved_settings.composition.representative_rows
        )

    included: list[str] = []
    sections: list[str] = []

    included.append(fragments.PREAMBLE)
    sections.append(
        fragments.fragment_text(fragments.PREAMBLE).replace("{csv_data}", table.source_text)
    )

    core_names = enabled_core_fragments(flags)
    included.append(fragments.CORE_TEMPLATE)
    included.extend(core_names)
    sections.append(
        "## 📝 CORE TEST SCRIPT TEMPLATE (MANDATORY):\n"
        + _code_block("".join(fragments.fragment_text(name) for name in core_names))
    )

    if representative_rows:
        included.append(fragments.WORKED_EXAMPLE)
        sections.append(_render_worked_examples(core_names, representative_rows))
    else:
        logger.debug("No data rows; skipping the worked example.")

    if flags.has_test_env:
        included.extend((fragments.ENVIRONMENT_TABLE, fragments.ENVIRONMENT_SWITCH))
        sections.append(_render_environment_section(environments, resolved_settings))

    if resolved_settings.composition.include_locator_map and locator_groups:
        included.append(fragments.LOCATOR_MAP)
        sections.append(_render_locator_section(locator_groups))

    included.append(fragments.CLOSING)
    sections.append(fragments.fragment_text(fragments.CLOSING))

    logger.debug("Composed fragments: %s", ", ".join(included))
    return CompositionResult(text="\n\n".join(sections), included_fragments=tuple(included))


def enabled_core_fragments(flags: FeatureFlags) -> tuple[str, ...]:
    """Return the core template fragment names the flags enable, in declared order."""
    return tuple(name for name, gate in CORE_TEMPLATE_ORDER if gate is None or getattr(flags, gate))


def _render_worked_examples(core_names: Sequence[str], rows: Sequence[TestCaseRow]) -> str:
    parts = ["## 🧪 GENERATED EXAMPLE FROM CSV DATA:"]
    for row in rows:
        row_names = [
            name
            for name in core_names
            if name not in ROW_GATED_FRAGMENTS or row.has_value(ROW_GATED_FRAGMENTS[name])
        ]
        template = "".join(fragments.fragment_text(name) for name in row_names)
        parts.append(
            f"### {spec_file_name(row.file_name)} (line {row.line_number})\n"
            + _code_block(substitute_placeholders(template, row))
        )
    return "\n\n".join(parts)


def _render_environment_section(
    environments: Sequence[EnvironmentEntry], settings: GeneratorSettings
) -> str:
    table_code = render_environment_table(environments, settings.environments)
    switch_code = render_environment_switch(environments, settings.environments)
    return (
        "## 🌍 ENVIRONMENT CONFIGURATION (./data/ui/environments.ts):\n"
        + _code_block(table_code + "\n" + switch_code)
        + "\n\nRun a test against one environment with `ENV=<name> npx playwright test`."
    )


def _render_locator_section(locator_groups: Sequence[LocatorGroup]) -> str:
    parts = ["## 🧭 PAGE OBJECT LOCATORS (./pages/ui/):"]
    for group in locator_groups:
        test_file = spec_file_name(group.file_name)
        parts.append(
            f"### ./pages/ui/{group.class_name}.ts (used by ./tests/ui/{test_file})\n"
            + _code_block(render_page_object(group))
        )
    return "\n\n".join(parts)


def _code_block(code: str) -> str:
    return "```typescript\n" + code.rstrip("\n") + "\n```"
