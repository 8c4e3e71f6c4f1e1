"""Template composition exports."""

from .fragments import FRAGMENT_REGISTRY_VERSION, FRAGMENTS, TemplateFragment, fragment_text
from .placeholder_substitution import PLACEHOLDERS, split_hide_selectors, substitute_placeholders
from .representative_rows import select_representative_rows
from .template_composer import (
    CORE_TEMPLATE_ORDER,
    CompositionResult,
    compose,
    enabled_core_fragments,
)

__all__ = [
    "CORE_TEMPLATE_ORDER",
    "FRAGMENTS",
    "FRAGMENT_REGISTRY_VERSION",
    "PLACEHOLDERS",
    "CompositionResult",
    "TemplateFragment",
    "compose",
    "enabled_core_fragments",
    "fragment_text",
    "select_representative_rows",
    "split_hide_selectors",
    "substitute_placeholders",
]
