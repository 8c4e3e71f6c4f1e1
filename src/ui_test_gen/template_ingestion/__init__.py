"""Template ingestion exports."""

from .workbook_reader import TemplateValidationError, read_workbook_as_csv_text

__all__ = [
    "TemplateValidationError",
    "read_workbook_as_csv_text",
]
