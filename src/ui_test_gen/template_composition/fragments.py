"""Fixed template fragments for composed visual-test instructions."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

FRAGMENT_REGISTRY_VERSION = "1"

MODULE_IMPORT = "module_import"
TEST_HEADER = "test_header"
HIDE_ELEMENTS = "hide_elements"
EXECUTE_ACTION = "execute_action"
ELEMENT_LOCATOR = "element_locator"
TEXT_FILTER = "text_filter"
SCREENSHOT_ASSERTION = "screenshot_assertion"

PREAMBLE = "preamble"
CORE_TEMPLATE = "core_template"
WORKED_EXAMPLE = "worked_example"
ENVIRONMENT_TABLE = "environment_table"
ENVIRONMENT_SWITCH = "environment_switch"
LOCATOR_MAP = "locator_map"
CLOSING = "closing"


@dataclass(frozen=True)
class TemplateFragment:
    """Named block of fixed output text."""

    name: str
    text: str


_MODULE_IMPORT_TEXT = 'import { test, expect } from "@playwright/test";\n'

_TEST_HEADER_TEXT = """\
test.describe("test_description - Visual testing", () => {
	test("test_identifier", { tag: test_tags }, async ({ page }) => {
		const url = "test_url";
		await page.goto(url);
"""

_HIDE_ELEMENTS_TEXT = """\
		for (const selector of [test_hide_selector]) {
			await page.addStyleTag({
				content: `${selector} { display: none !important; }`
			});
		}
"""

_EXECUTE_ACTION_TEXT = """\
		// test_action
		// your code here
"""

_ELEMENT_LOCATOR_TEXT = """\
		let locator = page.locator("test_selector");
"""

_TEXT_FILTER_TEXT = """\
		locator = locator.filter({ hasText: /test_selector_text/i });
"""

_SCREENSHOT_ASSERTION_TEXT = """\
		await locator.scrollIntoViewIfNeeded();
		expect(await locator.screenshot()).toMatchSnapshot("test_identifier.png");
	});
});
"""

_PREAMBLE_TEXT = """\
I'll analyze the provided CSV data and provide guidance for generating visual testing scripts.

CSV Data received:
{csv_data}

## 📋 STEP-BY-STEP INSTRUCTIONS:

### Phase 1: Configuration Validation
- Step 1: Find the playwright.config.ts files in the project.
- Step 2: Check that `expect.toMatchSnapshot.snapshotDir` is set to "./screenshots".
- Step 3: If it is missing or different, add only this block and change nothing else:
  ```typescript
  expect: {
    timeout: 30000,
    toMatchSnapshot: {
      snapshotDir: "./screenshots"
    }
  }
  ```

### Phase 2: Test Files
- Step 4: Create one test file per distinct file_name in ./tests/ui, named <file_name>.spec.ts.
- Step 5: Rows sharing a file_name belong in the same test file and describe block.
- Step 6: Fill every test from the core test script template below.
- Step 7: Do not overwrite existing test files.

### Phase 3: Project Layout
- Step 8: ./utils/ui/ holds helpers (selectors.ts, helpers.ts, test-actions.ts, validation.ts).
- Step 9: ./data/ui/ holds test data and the environment table.
- Step 10: ./pages/ui/ holds the page-object locator classes.
- Step 11: Keep data files and page-object classes out of .spec.ts files.

### Phase 4: Generation
- Step 12: Each row has its own test_hide selector list; never merge hide selectors across rows.
- Step 13: Replace each test_action comment with code that performs the described action.
- Step 14: Run the generated test files to check that they pass.

### Phase 5: Refactoring
- Step 15: Group related tests and give them descriptive names.
- Step 16: Move shared selectors and helpers into ./utils/ui/ and import them from the tests.
- Step 17: Follow the project's existing code style.
"""

_CLOSING_TEXT = """\
## 🔄 TEMPLATE VARIABLES TO REPLACE:
- `test_description` → the test description from the CSV row
- `test_identifier` → the test description with every non-alphanumeric character removed
- `test_url` → the URL from the CSV row
- `test_tags` → the tag list for the row's selector
- `test_hide_selector` → the row's own hide selectors, as quoted strings
- `test_action` → the row's action description
- `test_selector` → the element selector from the CSV row
- `test_selector_text` → the row's text filter, with regex special characters escaped

## ✅ RULES TO FOLLOW:
1. NEVER deviate from the template structure.
2. ALWAYS use the exact import statement.
3. ALWAYS use the exact test.describe and test structure, including the tag list.
4. ALWAYS use the exact page.goto pattern.
5. ALWAYS use the exact hide selector loop pattern.
6. ALWAYS use the exact locator and screenshot pattern.
7. ALWAYS use the exact expect().toMatchSnapshot pattern.
8. ALWAYS check playwright.config.ts for snapshotDir="./screenshots".
9. ALWAYS keep the folder structure: utils/ui/, data/ui/, pages/ui/.
10. ALWAYS preserve row-specific test_hide selectors.
11. ALWAYS keep data files and page-object classes separate from .spec.ts files.
"""

FRAGMENTS = MappingProxyType(
    {
        fragment.name: fragment
        for fragment in (
            TemplateFragment(MODULE_IMPORT, _MODULE_IMPORT_TEXT),
            TemplateFragment(TEST_HEADER, _TEST_HEADER_TEXT),
            TemplateFragment(HIDE_ELEMENTS, _HIDE_ELEMENTS_TEXT),
            TemplateFragment(EXECUTE_ACTION, _EXECUTE_ACTION_TEXT),
            TemplateFragment(ELEMENT_LOCATOR, _ELEMENT_LOCATOR_TEXT),
            TemplateFragment(TEXT_FILTER, _TEXT_FILTER_TEXT),
            TemplateFragment(SCREENSHOT_ASSERTION, _SCREENSHOT_ASSERTION_TEXT),
            TemplateFragment(PREAMBLE, _PREAMBLE_TEXT),
            TemplateFragment(CLOSING, _CLOSING_TEXT),
        )
    }
)


def fragment_text(name: str) -> str:
    return FRAGMENTS[name].text
