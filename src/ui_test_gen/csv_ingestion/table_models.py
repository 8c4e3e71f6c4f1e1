"""Tabular test-case entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

FILE_NAME_COLUMN = "file_name"
TEST_URL_COLUMN = "test_url"
TEST_DESCRIPTION_COLUMN = "test_description"
TEST_SELECTOR_COLUMN = "test_selector"
TEST_SELECTOR_TEXT_COLUMN = "test_selector_text"
TEST_HIDE_COLUMN = "test_hide"
TEST_ACTION_COLUMN = "test_action"
TEST_ENV_COLUMN = "test_env"

REQUIRED_COLUMNS: tuple[str, ...] = (
    FILE_NAME_COLUMN,
    TEST_URL_COLUMN,
    TEST_DESCRIPTION_COLUMN,
    TEST_SELECTOR_COLUMN,
)
OPTIONAL_COLUMNS: tuple[str, ...] = (
    TEST_SELECTOR_TEXT_COLUMN,
    TEST_HIDE_COLUMN,
    TEST_ACTION_COLUMN,
    TEST_ENV_COLUMN,
)


@dataclass(frozen=True)
class TestCaseRow:
    """One data row of the test-case table, keyed by column name."""

    __test__ = False

    line_number: int
    values: Mapping[str, str]

    def value(self, column: str) -> str:
        """Return the trimmed value of `column`, or an empty string when absent."""
        return self.values.get(column, "").strip()

    def has_value(self, column: str) -> bool:
        return self.value(column) != ""

    @property
    def file_name(self) -> str:
        return self.value(FILE_NAME_COLUMN)

    @property
    def test_url(self) -> str:
        return self.value(TEST_URL_COLUMN)

    @property
    def test_description(self) -> str:
        return self.value(TEST_DESCRIPTION_COLUMN)

    @property
    def test_selector(self) -> str:
        return self.value(TEST_SELECTOR_COLUMN)

    @property
    def test_selector_text(self) -> str:
        return self.value(TEST_SELECTOR_TEXT_COLUMN)

    @property
    def test_hide(self) -> str:
        return self.value(TEST_HIDE_COLUMN)

    @property
    def test_action(self) -> str:
        return self.value(TEST_ACTION_COLUMN)

    @property
    def test_env(self) -> str:
        return self.value(TEST_ENV_COLUMN)


@dataclass(frozen=True)
class ParsedTable:
    """Header row plus data rows parsed from one raw input."""

    headers: tuple[str, ...]
    rows: tuple[TestCaseRow, ...]
    source_text: str

    def has_column(self, column: str) -> bool:
        return column in self.headers
