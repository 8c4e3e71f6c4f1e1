"""Test-case workbook ingestion service."""

from __future__ import annotations

import csv
import io
import logging
import re
import zipfile
from collections.abc import Sequence
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ui_test_gen.csv_ingestion import REQUIRED_COLUMNS
from ui_test_gen.template_generation import REQUIRED_GROUP_LABEL, TEMPLATE_SHEET_NAME

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"\s*[\r\n]+\s*")


class TemplateValidationError(Exception):
    """Raised when a test-case workbook cannot be read."""


def read_workbook_as_csv_text(workbook_path: Path | str) -> str:
    """Read the test-case sheet and return it as comma-delimited text.

    Both the generated template layout (group labels on row 1, column names on
    row 2) and a plain sheet with column names on row 1 are accepted. Cells
    containing the delimiter are quoted, so the text must be parsed with the
    `quoted` split mode.
    """
    path = Path(workbook_path)
    if not path.exists():
        raise TemplateValidationError(f"Workbook file not found: {path}")

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise TemplateValidationError(f"Workbook file cannot be read: {path} ({exc})") from exc
    try:
        sheet = (
            workbook[TEMPLATE_SHEET_NAME]
            if TEMPLATE_SHEET_NAME in workbook.sheetnames
            else workbook.active
        )
        if sheet is None:
            raise TemplateValidationError("Workbook has no active sheet.")
        rows = [_normalize_row(values) for values in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()

    if rows and rows[0] and rows[0][0] == REQUIRED_GROUP_LABEL:
        rows = rows[1:]
    if not rows or not any(rows[0]):
        raise TemplateValidationError("Workbook does not contain a header row.")

    headers = _trim_trailing_empty(rows[0])
    missing = [column for column in REQUIRED_COLUMNS if column not in headers]
    if missing:
        logger.warning("Workbook is missing required column(s): %s", ", ".join(missing))

    data_rows = [row[: len(headers)] for row in rows[1:] if any(row)]
    return _to_csv_text([headers, *data_rows])


def _normalize_row(values: Sequence[object]) -> list[str]:
    return [
        "" if value is None else _LINE_BREAKS.sub(" ", str(value).strip()) for value in values
    ]


def _trim_trailing_empty(values: list[str]) -> list[str]:
    trimmed = list(values)
    while trimmed and not trimmed[-1]:
        trimmed.pop()
    return trimmed


def _to_csv_text(rows: Sequence[Sequence[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()
