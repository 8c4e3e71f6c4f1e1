"""Locator map builder grouping rows by source file."""

from __future__ import annotations

import logging

from ui_test_gen.csv_ingestion.table_models import ParsedTable, TestCaseRow
from ui_test_gen.identifier_synthesis import find_identifier_collisions, to_identifier
from ui_test_gen.test_tagging import assign_tags

from .locator_models import AccessorSpec, LocatorGroup

ACCESSOR_SUFFIX = "Locator"
CLASS_SUFFIX = "Page"

logger = logging.getLogger(__name__)


def build_locator_groups(table: ParsedTable) -> tuple[LocatorGroup, ...]:
    """Group rows by `file_name` in first-seen order and derive one accessor per usable row."""
    rows_by_file: dict[str, list[TestCaseRow]] = {}
    for row in table.rows:
        rows_by_file.setdefault(row.file_name, []).append(row)

    groups = tuple(_build_group(file_name, rows) for file_name, rows in rows_by_file.items())
    logger.debug("Built %d locator group(s).", len(groups))
    return groups


def _build_group(file_name: str, rows: list[TestCaseRow]) -> LocatorGroup:
    accessors: list[AccessorSpec] = []
    described_rows: list[TestCaseRow] = []
    for row in rows:
        if not row.test_description or not row.test_selector:
            logger.debug(
                "Line %d has no description or selector; no accessor for it.", row.line_number
            )
            continue
        described_rows.append(row)
        accessors.append(
            AccessorSpec(
                accessor_name=accessor_name_for(row.test_description),
                selector=row.test_selector,
                selector_text=row.test_selector_text or None,
                tags=assign_tags(row.test_selector),
            )
        )

    collisions = find_identifier_collisions(row.test_description for row in described_rows)
    for identifier, descriptions in collisions.items():
        logger.warning(
            "Descriptions %s in '%s' all map to accessor '%s%s'.",
            ", ".join(repr(text) for text in descriptions),
            file_name,
            identifier,
            ACCESSOR_SUFFIX,
        )

    return LocatorGroup(
        file_name=file_name,
        class_name=class_name_for(file_name),
        rows=tuple(rows),
        accessors=tuple(accessors),
    )


def accessor_name_for(description: str) -> str:
    return f"{to_identifier(description)}{ACCESSOR_SUFFIX}"


def class_name_for(file_name: str) -> str:
    return f"{to_identifier(file_name)}{CLASS_SUFFIX}"
