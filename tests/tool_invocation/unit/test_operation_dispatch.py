"""Operation dispatch tests."""

from __future__ import annotations

import pytest
from ui_test_gen.csv_ingestion import MalformedInputError
from ui_test_gen.tool_invocation import (
    COMMANDS_LISTING,
    OPERATIONS_LISTING,
    MissingArgumentError,
    UnknownOperationError,
    invoke,
    operation_names,
)

_CSV = "file_name,test_url,test_description,test_selector\npdp,https://x,Full Page,body\n"


def test_generate_returns_single_text_content_item() -> None:
    result = invoke("generateVisualTests", {"csvData": _CSV})

    assert list(result) == ["content"]
    (item,) = result["content"]
    assert item["type"] == "text"
    assert _CSV in item["text"]


@pytest.mark.parametrize("args", [None, {}, {"csvData": None}, {"csvData": ""}, {"csvData": 7}])
def test_missing_csv_data_fails_before_parsing(args) -> None:
    with pytest.raises(MissingArgumentError, match="csvData parameter is required"):
        invoke("generateVisualTests", args)


def test_whitespace_csv_data_is_malformed() -> None:
    with pytest.raises(MalformedInputError):
        invoke("generateVisualTests", {"csvData": "  \n "})


def test_listing_operations_return_fixed_text() -> None:
    assert invoke("listTools")["content"][0]["text"] == OPERATIONS_LISTING
    assert invoke("listCommands", {"ignored": True})["content"][0]["text"] == COMMANDS_LISTING


def test_unknown_operation_is_rejected() -> None:
    with pytest.raises(UnknownOperationError, match="generateVisualTests"):
        invoke("deleteEverything", {})


def test_operation_names() -> None:
    assert operation_names() == ("generateVisualTests", "listTools", "listCommands")
