"""Per-invocation feature detection over a parsed table."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ui_test_gen.csv_ingestion.table_models import (
    TEST_ACTION_COLUMN,
    TEST_ENV_COLUMN,
    TEST_HIDE_COLUMN,
    TEST_SELECTOR_TEXT_COLUMN,
    ParsedTable,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeatureFlags:
    """Which optional fragments apply to the whole table."""

    has_hide_selectors: bool
    has_test_actions: bool
    has_test_env: bool
    has_selector_text: bool


def detect_features(table: ParsedTable) -> FeatureFlags:
    """Evaluate every optional column once for the whole table."""
    flags = FeatureFlags(
        has_hide_selectors=column_has_values(table, TEST_HIDE_COLUMN),
        has_test_actions=column_has_values(table, TEST_ACTION_COLUMN),
        has_test_env=column_has_values(table, TEST_ENV_COLUMN),
        has_selector_text=column_has_values(table, TEST_SELECTOR_TEXT_COLUMN),
    )
    logger.debug("Detected feature flags: %s", flags)
    return flags


def column_has_values(table: ParsedTable, column: str) -> bool:
    """Return True when `column` is a header and at least one row fills it."""
    if not table.has_column(column):
        return False
    return any(row.has_value(column) for row in table.rows)
