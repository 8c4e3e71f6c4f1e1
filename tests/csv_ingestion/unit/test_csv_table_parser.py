"""CSV table parser tests."""

from __future__ import annotations

import pytest
from ui_test_gen.csv_ingestion import MalformedInputError, parse_csv_table


def test_parse_splits_headers_and_rows() -> None:
    table = parse_csv_table(
        "file_name, test_url ,test_description,test_selector\n"
        "pdp,https://x, Full Page ,body\n"
    )

    assert table.headers == ("file_name", "test_url", "test_description", "test_selector")
    assert len(table.rows) == 1
    row = table.rows[0]
    assert row.file_name == "pdp"
    assert row.test_url == "https://x"
    assert row.test_description == "Full Page"
    assert row.test_selector == "body"
    assert row.line_number == 2


def test_parse_pads_short_rows_and_truncates_long_rows() -> None:
    table = parse_csv_table(
        "file_name,test_url,test_description,test_selector,test_hide\n"
        "pdp,https://x\n"
        "plp,https://y,Grid,.grid,.modal,extra,values\n"
    )

    short_row, long_row = table.rows
    assert short_row.values == {
        "file_name": "pdp",
        "test_url": "https://x",
        "test_description": "",
        "test_selector": "",
        "test_hide": "",
    }
    assert long_row.test_hide == ".modal"
    assert "extra" not in long_row.values.values()


def test_parse_skips_blank_lines_and_handles_crlf() -> None:
    table = parse_csv_table(
        "file_name,test_url,test_description,test_selector\r\n"
        "\r\n"
        "pdp,https://x,Full Page,body\r\n"
        "   \r\n"
        "plp,https://y,Grid,.grid\r\n"
    )

    assert [row.file_name for row in table.rows] == ["pdp", "plp"]
    assert [row.line_number for row in table.rows] == [3, 5]


def test_parse_splits_rows_only_on_newline_characters() -> None:
    table = parse_csv_table(
        "file_name,test_url,test_description,test_selector,test_action\r"
        "pdp,https://x,Full Page,body,first second\x0cthird\x85end\n"
    )

    (row,) = table.rows
    assert row.test_action == "first second\x0cthird\x85end"
    assert row.line_number == 2


def test_parse_keeps_source_text_for_echoing() -> None:
    raw = "file_name,test_url,test_description,test_selector\npdp,https://x,Full Page,body\n"

    assert parse_csv_table(raw).source_text == raw


def test_missing_column_reads_as_empty_string() -> None:
    table = parse_csv_table("file_name,test_url\npdp,https://x")

    assert table.rows[0].test_env == ""
    assert table.rows[0].value("unknown_column") == ""
    assert table.has_column("test_env") is False


def test_header_only_input_yields_no_rows() -> None:
    table = parse_csv_table("file_name,test_url,test_description,test_selector")

    assert table.rows == ()


def test_duplicate_headers_keep_first_position() -> None:
    table = parse_csv_table("file_name,test_url,file_name\npdp,https://x,other")

    assert table.headers == ("file_name", "test_url")
    assert table.rows[0].file_name == "pdp"


@pytest.mark.parametrize("raw", ["", "   ", "\n\n  \n"])
def test_empty_input_is_malformed(raw: str) -> None:
    with pytest.raises(MalformedInputError):
        parse_csv_table(raw)


def test_naive_mode_splits_inside_quotes() -> None:
    table = parse_csv_table(
        "file_name,test_url,test_description,test_selector,test_hide\n"
        'pdp,https://x,Full Page,body,".modal, #banner"\n'
    )

    assert table.rows[0].test_hide == '".modal'


def test_quoted_mode_keeps_quoted_delimiters_together() -> None:
    table = parse_csv_table(
        "file_name,test_url,test_description,test_selector,test_hide\n"
        'pdp,https://x,Full Page,body,".modal, #banner"\n',
        split_mode="quoted",
    )

    assert table.rows[0].test_hide == ".modal, #banner"


def test_quoted_and_naive_modes_agree_on_plain_fields() -> None:
    raw = (
        "file_name,test_url,test_description,test_selector,test_env\n"
        "pdp, https://x ,Full Page,body,prep\n"
    )

    naive = parse_csv_table(raw)
    quoted = parse_csv_table(raw, split_mode="quoted")

    assert naive.headers == quoted.headers
    assert naive.rows == quoted.rows


def test_unknown_split_mode_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported split mode"):
        parse_csv_table("file_name\npdp", split_mode="excel")
