"""Locator mapping exports."""

from .locator_map_builder import accessor_name_for, build_locator_groups, class_name_for
from .locator_models import AccessorSpec, LocatorGroup
from .page_object_renderer import escape_regex_literal, render_locator_expression, render_page_object

__all__ = [
    "AccessorSpec",
    "LocatorGroup",
    "accessor_name_for",
    "build_locator_groups",
    "class_name_for",
    "escape_regex_literal",
    "render_locator_expression",
    "render_page_object",
]
