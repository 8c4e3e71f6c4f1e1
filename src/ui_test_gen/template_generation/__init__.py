"""Template generation exports."""

from .constants import (
    OPTIONAL_GROUP_LABEL,
    REQUIRED_GROUP_LABEL,
    SAMPLE_ROWS,
    TEMPLATE_COLUMNS,
    TEMPLATE_SHEET_NAME,
)
from .template_workbook_builder import generate_template_workbook

__all__ = [
    "OPTIONAL_GROUP_LABEL",
    "REQUIRED_GROUP_LABEL",
    "SAMPLE_ROWS",
    "TEMPLATE_COLUMNS",
    "TEMPLATE_SHEET_NAME",
    "generate_template_workbook",
]
