"""Selection of the rows that seed worked template examples."""

from __future__ import annotations

from collections.abc import Callable

from ui_test_gen.csv_ingestion.table_models import ParsedTable, TestCaseRow

RowSelector = Callable[[ParsedTable], tuple[TestCaseRow, ...]]


def _first_row(table: ParsedTable) -> tuple[TestCaseRow, ...]:
    return table.rows[:1]


def _all_rows(table: ParsedTable) -> tuple[TestCaseRow, ...]:
    return table.rows


_POLICIES: dict[str, RowSelector] = {
    "first": _first_row,
    "all": _all_rows,
}


def select_representative_rows(table: ParsedTable, policy: str = "first") -> tuple[TestCaseRow, ...]:
    """Return the rows a policy picks; `first` yields at most one row."""
    try:
        selector = _POLICIES[policy]
    except KeyError as exc:
        raise ValueError(f"Unknown representative row policy: {policy!r}") from exc
    return selector(table)
