"""Identifier synthesis from free-text descriptions and file names."""

from __future__ import annotations

import re
from collections.abc import Iterable

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
SPEC_FILE_SUFFIX = ".spec.ts"


def to_identifier(text: str) -> str:
    """Drop every non-alphanumeric character and upper-case the first one left."""
    cleaned = _NON_ALPHANUMERIC.sub("", text)
    return cleaned[:1].upper() + cleaned[1:]


def find_identifier_collisions(texts: Iterable[str]) -> dict[str, tuple[str, ...]]:
    """Return identifiers that more than one distinct text maps to.

    The result maps each colliding identifier to its source texts in
    first-seen order. It is computed fresh for every call.
    """
    sources: dict[str, list[str]] = {}
    for text in texts:
        bucket = sources.setdefault(to_identifier(text), [])
        if text not in bucket:
            bucket.append(text)
    return {
        identifier: tuple(texts_for_identifier)
        for identifier, texts_for_identifier in sources.items()
        if len(texts_for_identifier) > 1
    }


def spec_file_name(file_name: str) -> str:
    """Return the Playwright spec file name for a `file_name` column value."""
    if file_name.endswith(SPEC_FILE_SUFFIX):
        return file_name
    return f"{file_name}{SPEC_FILE_SUFFIX}"
