"""Environment to base-URL table builder."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ui_test_gen.csv_ingestion.table_models import ParsedTable

ENVIRONMENT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9-]+$")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentEntry:
    """A named deployment target with its base URL."""

    name: str
    base_url: str


def build_environments(table: ParsedTable) -> tuple[EnvironmentEntry, ...]:
    """Collect environment entries in first-seen order; the first URL per name wins."""
    entries: dict[str, EnvironmentEntry] = {}
    for row in table.rows:
        name = row.test_env
        base_url = row.test_url
        if not name or not base_url:
            continue
        existing = entries.get(name)
        if existing is not None:
            if existing.base_url != base_url:
                logger.warning(
                    "Environment '%s' on line %d keeps its first URL %s; ignoring %s.",
                    name,
                    row.line_number,
                    existing.base_url,
                    base_url,
                )
            continue
        if not is_valid_environment_name(name):
            logger.warning(
                "Environment name '%s' on line %d is not alphanumeric with hyphens.",
                name,
                row.line_number,
            )
        entries[name] = EnvironmentEntry(name=name, base_url=base_url)
    return tuple(entries.values())


def is_valid_environment_name(name: str) -> bool:
    return bool(ENVIRONMENT_NAME_PATTERN.fullmatch(name))
