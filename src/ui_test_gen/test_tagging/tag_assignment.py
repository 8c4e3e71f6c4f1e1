"""Classification tags for visual test rows."""

from __future__ import annotations

import json
from collections.abc import Sequence

VISUAL_REGRESSION_TAG = "visual-regression-tag"
SCREENSHOT_TAG = "screenshot-tag"
FULLPAGE_TAG = "fullpage-tag"
SECTION_TAG = "section-tag"

BASE_TAGS: tuple[str, ...] = (VISUAL_REGRESSION_TAG, SCREENSHOT_TAG)
FULL_PAGE_SELECTOR = "body"


def assign_tags(selector: str) -> tuple[str, ...]:
    """Return the base tags plus exactly one of the full-page or section tags."""
    return (*BASE_TAGS, selector_tag(selector))


def selector_tag(selector: str) -> str:
    return FULLPAGE_TAG if is_full_page_selector(selector) else SECTION_TAG


def is_full_page_selector(selector: str) -> bool:
    return selector == FULL_PAGE_SELECTOR


def render_tag_list(tags: Sequence[str]) -> str:
    """Render tags as a Playwright `tag` array literal."""
    return "[" + ", ".join(json.dumps(f"@{tag}") for tag in tags) + "]"
