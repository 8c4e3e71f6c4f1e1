"""Delimited test-case text parser."""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Sequence

from .table_models import ParsedTable, TestCaseRow

FIELD_DELIMITER = ","
SPLIT_MODES: tuple[str, ...] = ("naive", "quoted")
_LINE_BOUNDARY = re.compile(r"\r\n|\r|\n")

logger = logging.getLogger(__name__)


class MalformedInputError(Exception):
    """Raised when the input has no usable header line."""


def parse_csv_table(raw_text: str, *, split_mode: str = "naive") -> ParsedTable:
    """Split raw delimited text into a header row and padded data rows.

    The default ``naive`` mode splits every line on the delimiter by position,
    so a delimiter inside a quoted field is read as a field boundary. The
    ``quoted`` mode honours standard CSV quoting instead; both modes agree on
    unquoted fields that contain no delimiter.
    """
    if split_mode not in SPLIT_MODES:
        raise ValueError(f"Unsupported split mode: {split_mode!r}")
    stripped = raw_text.strip()
    if not stripped:
        raise MalformedInputError("CSV data is empty; a header line is required.")

    lines = _LINE_BOUNDARY.split(stripped)
    header_fields = _split_line(lines[0], split_mode)
    headers = _unique_headers(header_fields)
    header_positions = _first_positions(header_fields)

    rows: list[TestCaseRow] = []
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        values = _split_line(line, split_mode)
        if len(values) > len(header_fields):
            logger.warning(
                "Line %d has %d values for %d columns; extra values are ignored.",
                line_number,
                len(values),
                len(header_fields),
            )
        rows.append(
            TestCaseRow(
                line_number=line_number,
                values={
                    name: values[position] if position < len(values) else ""
                    for name, position in header_positions.items()
                },
            )
        )

    logger.debug("Parsed %d column(s) and %d row(s).", len(headers), len(rows))
    return ParsedTable(headers=headers, rows=tuple(rows), source_text=raw_text)


def _split_line(line: str, split_mode: str) -> list[str]:
    if split_mode == "quoted":
        fields = next(csv.reader([line], skipinitialspace=True), [])
    else:
        fields = line.split(FIELD_DELIMITER)
    return [field.strip() for field in fields]


def _unique_headers(fields: Sequence[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(fields))


def _first_positions(fields: Sequence[str]) -> dict[str, int]:
    positions: dict[str, int] = {}
    for index, name in enumerate(fields):
        positions.setdefault(name, index)
    return positions
