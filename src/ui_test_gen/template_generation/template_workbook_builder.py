"""Excel test-case template generation service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ui_test_gen.csv_ingestion import OPTIONAL_COLUMNS, REQUIRED_COLUMNS

from .constants import (
    OPTIONAL_GROUP_LABEL,
    REQUIRED_GROUP_LABEL,
    SAMPLE_ROWS,
    TEMPLATE_COLUMNS,
    TEMPLATE_SHEET_NAME,
)


def generate_template_workbook(output_path: Path | str, *, include_samples: bool = True) -> None:
    """Create the Excel template with required and optional test-case columns."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = TEMPLATE_SHEET_NAME

    _write_group_headers(sheet, len(REQUIRED_COLUMNS), len(OPTIONAL_COLUMNS))
    for column_index, name in enumerate(TEMPLATE_COLUMNS, start=1):
        sheet.cell(row=2, column=column_index, value=name)
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            14, min(len(name) + 6, 40)
        )

    if include_samples:
        for row_index, sample in enumerate(SAMPLE_ROWS, start=3):
            for column_index, name in enumerate(TEMPLATE_COLUMNS, start=1):
                sheet.cell(row=row_index, column=column_index, value=sample.get(name) or None)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)


def _write_group_headers(sheet, required_count: int, optional_count: int) -> None:
    groups = [
        (REQUIRED_GROUP_LABEL, 1, required_count),
        (OPTIONAL_GROUP_LABEL, required_count + 1, optional_count),
    ]
    for label, start_column, count in groups:
        if count <= 0:
            continue
        end_column = start_column + count - 1
        start_letter = get_column_letter(start_column)
        end_letter = get_column_letter(end_column)
        sheet.merge_cells(f"{start_letter}1:{end_letter}1")
        sheet[f"{start_letter}1"].value = label
        sheet[f"{start_letter}1"].style = "Headline 1"
