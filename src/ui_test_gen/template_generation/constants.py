"""Shared template workbook constants."""

from __future__ import annotations

from ui_test_gen.csv_ingestion import OPTIONAL_COLUMNS, REQUIRED_COLUMNS

TEMPLATE_SHEET_NAME = "TestCases"

REQUIRED_GROUP_LABEL = "Required"
OPTIONAL_GROUP_LABEL = "Optional"

TEMPLATE_COLUMNS: tuple[str, ...] = REQUIRED_COLUMNS + OPTIONAL_COLUMNS

SAMPLE_ROWS: tuple[dict[str, str], ...] = (
    {
        "file_name": "pdp",
        "test_url": "https://prep.example.com/products/sample-product",
        "test_description": "Pdp Full Page",
        "test_selector": "body",
        "test_selector_text": "",
        "test_hide": ".modal-backdrop.flyout; #onetrust-banner-sdk",
        "test_action": "full site scroll to reveal all lazy load components",
        "test_env": "prep",
    },
    {
        "file_name": "pdp",
        "test_url": "https://int.example.com/products/sample-product",
        "test_description": "Pdp Add To Cart",
        "test_selector": "button",
        "test_selector_text": "Add to cart",
        "test_hide": "",
        "test_action": "",
        "test_env": "int",
    },
)
