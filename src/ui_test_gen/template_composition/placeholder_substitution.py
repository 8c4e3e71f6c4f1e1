"""Placeholder substitution for the single-test template fragments."""

from __future__ import annotations

import json
import re
from collections.abc import Callable

from ui_test_gen.csv_ingestion.table_models import TestCaseRow
from ui_test_gen.identifier_synthesis import to_identifier
from ui_test_gen.locator_mapping import escape_regex_literal
from ui_test_gen.test_tagging import assign_tags, render_tag_list

_HIDE_SELECTOR_SEPARATORS = re.compile(r"[,;]")


def _string_content(value: str) -> str:
    return json.dumps(value)[1:-1]


def split_hide_selectors(value: str) -> tuple[str, ...]:
    """Split a `test_hide` cell into individual selectors."""
    return tuple(part.strip() for part in _HIDE_SELECTOR_SEPARATORS.split(value) if part.strip())


# Longer names first so `test_selector` never shadows `test_selector_text`.
_RENDERERS: dict[str, Callable[[TestCaseRow], str]] = {
    "test_selector_text": lambda row: escape_regex_literal(row.test_selector_text),
    "test_hide_selector": lambda row: ", ".join(
        json.dumps(selector) for selector in split_hide_selectors(row.test_hide)
    ),
    "test_description": lambda row: _string_content(row.test_description),
    "test_identifier": lambda row: _string_content(to_identifier(row.test_description)),
    "test_selector": lambda row: _string_content(row.test_selector),
    "test_action": lambda row: row.test_action,
    "test_tags": lambda row: render_tag_list(assign_tags(row.test_selector)),
    "test_url": lambda row: _string_content(row.test_url),
}

PLACEHOLDERS: tuple[str, ...] = tuple(_RENDERERS)
_PLACEHOLDER_PATTERN = re.compile(r"\b(" + "|".join(PLACEHOLDERS) + r")\b")


def substitute_placeholders(template: str, row: TestCaseRow) -> str:
    """Replace every placeholder token in one pass with the row's rendered value."""
    return _PLACEHOLDER_PATTERN.sub(lambda match: _RENDERERS[match.group(1)](row), template)
