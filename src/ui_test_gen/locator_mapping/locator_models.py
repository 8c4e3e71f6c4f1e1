"""Locator map entities."""

from __future__ import annotations

from dataclasses import dataclass

from ui_test_gen.csv_ingestion.table_models import TestCaseRow


@dataclass(frozen=True)
class AccessorSpec:
    """One static locator accessor derived from a table row."""

    accessor_name: str
    selector: str
    selector_text: str | None
    tags: tuple[str, ...]

    @property
    def has_text_filter(self) -> bool:
        return bool(self.selector_text)


@dataclass(frozen=True)
class LocatorGroup:
    """Rows sharing one `file_name`, rendered as one page-object class."""

    file_name: str
    class_name: str
    rows: tuple[TestCaseRow, ...]
    accessors: tuple[AccessorSpec, ...]
