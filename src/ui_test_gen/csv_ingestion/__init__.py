"""CSV ingestion exports."""

from .csv_table_parser import SPLIT_MODES, MalformedInputError, parse_csv_table
from .table_models import (
    FILE_NAME_COLUMN,
    OPTIONAL_COLUMNS,
    REQUIRED_COLUMNS,
    TEST_ACTION_COLUMN,
    TEST_DESCRIPTION_COLUMN,
    TEST_ENV_COLUMN,
    TEST_HIDE_COLUMN,
    TEST_SELECTOR_COLUMN,
    TEST_SELECTOR_TEXT_COLUMN,
    TEST_URL_COLUMN,
    ParsedTable,
    TestCaseRow,
)

__all__ = [
    "FILE_NAME_COLUMN",
    "OPTIONAL_COLUMNS",
    "REQUIRED_COLUMNS",
    "SPLIT_MODES",
    "TEST_ACTION_COLUMN",
    "TEST_DESCRIPTION_COLUMN",
    "TEST_ENV_COLUMN",
    "TEST_HIDE_COLUMN",
    "TEST_SELECTOR_COLUMN",
    "TEST_SELECTOR_TEXT_COLUMN",
    "TEST_URL_COLUMN",
    "MalformedInputError",
    "ParsedTable",
    "TestCaseRow",
    "parse_csv_table",
]
