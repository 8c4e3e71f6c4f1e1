"""Page-object locator class rendering."""

from __future__ import annotations

import json
import re

from ui_test_gen.test_tagging import render_tag_list

from .locator_models import AccessorSpec, LocatorGroup

_REGEX_SPECIAL_CHARACTERS = re.compile(r"[.*+?^${}()|\[\]\\/]")

_PAGE_OBJECT_HEADER = 'import type { Locator, Page as PlaywrightPage } from "@playwright/test";\n'

_FALLBACK_ACCESSOR = """\
	locatorFor(record: { test_selector: string; test_selector_text?: string }): Locator {
		const locator = this.page.locator(record.test_selector);
		const text = record.test_selector_text?.trim();
		if (!text) {
			return locator;
		}
		const escaped = text.replace(/[.*+?^${}()|[\\]\\\\/]/g, "\\\\$&");
		return locator.filter({ hasText: new RegExp(escaped, "i") });
	}
"""


def escape_regex_literal(text: str) -> str:
    """Escape `text` so it matches literally inside a `/.../` regex literal."""
    return _REGEX_SPECIAL_CHARACTERS.sub(lambda match: "\\" + match.group(0), text)


def render_locator_expression(selector: str, selector_text: str | None, page_ref: str) -> str:
    """Render a locator call, narrowed by a case-insensitive text filter when given."""
    expression = f"{page_ref}.locator({json.dumps(selector)})"
    if selector_text:
        expression += f".filter({{ hasText: /{escape_regex_literal(selector_text)}/i }})"
    return expression


def render_page_object(group: LocatorGroup) -> str:
    """Render one page-object class with a getter per accessor and a runtime fallback."""
    parts = [
        _PAGE_OBJECT_HEADER,
        "",
        f"export class {group.class_name} {{",
        "\tconstructor(private readonly page: PlaywrightPage) {}",
        "",
    ]
    for accessor in group.accessors:
        parts.append(_render_accessor(accessor))
    parts.append(_FALLBACK_ACCESSOR + "}\n")
    return "\n".join(parts)


def _render_accessor(accessor: AccessorSpec) -> str:
    expression = render_locator_expression(
        accessor.selector, accessor.selector_text, page_ref="this.page"
    )
    return (
        f"\t// tags: {render_tag_list(accessor.tags)}\n"
        f"\tget {accessor.accessor_name}(): Locator {{\n"
        f"\t\treturn {expression};\n"
        "\t}\n"
    )
