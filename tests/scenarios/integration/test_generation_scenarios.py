"""Scenario-style integration tests for the generation boundary."""

from __future__ import annotations

import pytest
from ui_test_gen.csv_ingestion import parse_csv_table
from ui_test_gen.environment_table import EnvironmentEntry, build_environments
from ui_test_gen.feature_detection import detect_features
from ui_test_gen.locator_mapping import build_locator_groups
from ui_test_gen.test_tagging import assign_tags
from ui_test_gen.tool_invocation import MissingArgumentError, invoke


def test_full_page_row_with_hide_selector_and_empty_action() -> None:
    csv_text = (
        "file_name,test_url,test_description,test_selector,test_hide,test_action\n"
        "pdp,https://x,Full Page,body,.modal,\n"
    )
    table = parse_csv_table(csv_text)

    flags = detect_features(table)

    assert flags.has_hide_selectors is True
    assert flags.has_test_actions is False
    assert assign_tags(table.rows[0].test_selector) == (
        "visual-regression-tag",
        "screenshot-tag",
        "fullpage-tag",
    )
    text = invoke("generateVisualTests", {"csvData": csv_text})["content"][0]["text"]
    assert "for (const selector of [" in text
    assert "// your code here" not in text


def test_environment_order_is_first_seen_not_alphabetical() -> None:
    table = parse_csv_table(
        "file_name,test_url,test_description,test_selector,test_env\n"
        "pdp,https://url1.example.com,Full Page,body,prep\n"
        "pdp,https://url2.example.com,Full Page,body,int\n"
    )

    assert build_environments(table) == (
        EnvironmentEntry(name="prep", base_url="https://url1.example.com"),
        EnvironmentEntry(name="int", base_url="https://url2.example.com"),
    )


def test_missing_csv_data_produces_no_text() -> None:
    with pytest.raises(MissingArgumentError):
        invoke("generateVisualTests", {})


def test_shared_file_name_yields_two_accessors_in_row_order() -> None:
    table = parse_csv_table(
        "file_name,test_url,test_description,test_selector\n"
        "pdp,https://x,Full Page,body\n"
        "pdp,https://x,Top Section,.top\n"
    )

    (group,) = build_locator_groups(table)

    assert group.file_name == "pdp"
    assert [accessor.accessor_name for accessor in group.accessors] == [
        "FullPageLocator",
        "TopSectionLocator",
    ]


def test_both_flags_render_hide_before_action_end_to_end() -> None:
    csv_text = (
        "file_name,test_url,test_description,test_selector,test_hide,test_action\n"
        "test1.spec.ts,https://example.com,Test 1,button,button.hidden,click_button\n"
        "test2.spec.ts,https://example.com,Test 2,div,div.ads,fill_form\n"
    )

    text = invoke("generateVisualTests", {"csvData": csv_text})["content"][0]["text"]

    assert text.index("for (const selector of [test_hide_selector])") < text.index(
        "// test_action\n"
    )
    assert "// click_button" in text
    assert "### ./pages/ui/Test1spectsPage.ts (used by ./tests/ui/test1.spec.ts)" in text
