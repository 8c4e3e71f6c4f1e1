"""Test tagging exports."""

from .tag_assignment import (
    BASE_TAGS,
    FULLPAGE_TAG,
    SCREENSHOT_TAG,
    SECTION_TAG,
    VISUAL_REGRESSION_TAG,
    assign_tags,
    is_full_page_selector,
    render_tag_list,
    selector_tag,
)

__all__ = [
    "BASE_TAGS",
    "FULLPAGE_TAG",
    "SCREENSHOT_TAG",
    "SECTION_TAG",
    "VISUAL_REGRESSION_TAG",
    "assign_tags",
    "is_full_page_selector",
    "render_tag_list",
    "selector_tag",
]
