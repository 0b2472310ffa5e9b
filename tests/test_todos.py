"""Tests for due signals, status normalisation, and todo list helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.todos.signals import DueSignal, classify_due_signal, parse_due_date
from src.todos.status import TodoStatus, coerce_status, normalize_status
from src.todos.views import (
    UNASSIGNED,
    assignee_label,
    assignee_options,
    filter_todos,
    format_due_date,
    sort_todos,
)

TODAY = date(2024, 6, 10)

# ---------------------------------------------------------------------------
# Due signal tests
# ---------------------------------------------------------------------------


class TestClassifyDueSignal:
    @pytest.mark.parametrize(
        ("due", "expected"),
        [
            ("2024-06-09", DueSignal.RED),
            ("2024-01-01", DueSignal.RED),
            ("2024-06-10", DueSignal.YELLOW),
            ("2024-06-11", DueSignal.YELLOW),
            ("2024-06-12", DueSignal.YELLOW),
            ("2024-06-13", DueSignal.GREEN),
            ("2025-01-01", DueSignal.GREEN),
        ],
    )
    def test_calendar_distance(self, due: str, expected: DueSignal) -> None:
        assert classify_due_signal(due, TODAY) is expected

    @pytest.mark.parametrize("due", [None, "", "   ", "not-a-date", "2024-13-45"])
    def test_unset_or_unparseable_is_gray(self, due: str | None) -> None:
        assert classify_due_signal(due, TODAY) is DueSignal.GRAY

    def test_time_of_day_of_now_is_ignored(self) -> None:
        late = datetime(2024, 6, 10, 23, 59, 0)
        early = datetime(2024, 6, 10, 0, 0, 1)
        for due in ("2024-06-09", "2024-06-12", "2024-06-13"):
            assert classify_due_signal(due, late) is classify_due_signal(due, early)

    def test_time_of_day_of_due_is_ignored(self) -> None:
        assert classify_due_signal("2024-06-09T23:59:59", TODAY) is DueSignal.RED
        assert classify_due_signal("2024-06-12T23:59:59", TODAY) is DueSignal.YELLOW
        assert classify_due_signal("2024-06-13T00:00:00", TODAY) is DueSignal.GREEN

    def test_date_and_datetime_inputs(self) -> None:
        assert classify_due_signal(date(2024, 6, 9), TODAY) is DueSignal.RED
        assert classify_due_signal(datetime(2024, 6, 20, 8, 30), TODAY) is DueSignal.GREEN

    def test_aware_timestamp_uses_local_day(self) -> None:
        due = datetime(2024, 6, 20, 12, 0, tzinfo=timezone.utc)
        assert parse_due_date(due) == due.astimezone().date()
        assert parse_due_date("2024-06-20T12:00:00+00:00") == due.astimezone().date()

    def test_defaults_to_today(self) -> None:
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        assert classify_due_signal(tomorrow) is DueSignal.YELLOW

    def test_values_are_strings(self) -> None:
        assert [s.value for s in DueSignal] == ["red", "yellow", "green", "gray"]


# ---------------------------------------------------------------------------
# Status tests
# ---------------------------------------------------------------------------


class TestStatus:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("open", TodoStatus.OPEN),
            (" Done ", TodoStatus.DONE),
            ("in_progress", TodoStatus.IN_PROGRESS),
            ("in-progress", TodoStatus.IN_PROGRESS),
            ("InProgress", TodoStatus.IN_PROGRESS),
            ("doing", TodoStatus.IN_PROGRESS),
        ],
    )
    def test_normalize_aliases(self, raw: str, expected: TodoStatus) -> None:
        assert normalize_status(raw) is expected

    @pytest.mark.parametrize("raw", ["", "closed", "todo", "進行中"])
    def test_normalize_rejects_unknown(self, raw: str) -> None:
        assert normalize_status(raw) is None

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("進行中", TodoStatus.IN_PROGRESS),
            ("完了", TodoStatus.DONE),
            ("doing", TodoStatus.IN_PROGRESS),
            ("whatever", TodoStatus.OPEN),
            (None, TodoStatus.OPEN),
        ],
    )
    def test_coerce(self, raw: object, expected: TodoStatus) -> None:
        assert coerce_status(raw) is expected


# ---------------------------------------------------------------------------
# List view tests
# ---------------------------------------------------------------------------


def _todo(todo_id: str, due: str | None, status: str = "open", assignee_id: str | None = None,
          assignee: dict | None = None) -> dict:
    return {
        "id": todo_id,
        "task": f"task {todo_id}",
        "status": status,
        "due_date": due,
        "assignee_id": assignee_id,
        "assignee": assignee,
    }


TODOS = [
    _todo("a", "2024-06-12", assignee_id="p1", assignee={"full_name": "Alice", "username": "alice"}),
    _todo("b", None, status="done"),
    _todo("c", "2024-06-01", status="in_progress", assignee_id="p2", assignee=None),
    _todo("d", "2024-07-01", assignee_id="p1", assignee={"full_name": "Alice", "username": "alice"}),
]


class TestViews:
    def test_format_due_date(self) -> None:
        assert format_due_date("2024-06-09") == "2024/06/09"
        assert format_due_date("2024-06-09T10:00:00") == "2024/06/09"
        assert format_due_date(None) == "-"
        assert format_due_date("soon") == "soon"

    def test_assignee_label(self) -> None:
        assert assignee_label(TODOS[0]) == "Alice"
        assert assignee_label(TODOS[1]) == "Unassigned"
        assert assignee_label(TODOS[2]) == "ID: p2"
        assert assignee_label(_todo("e", None, assignee_id="p3", assignee={"username": "eve"})) == "eve"

    def test_assignee_options_first_seen_order(self) -> None:
        assert assignee_options(TODOS) == [("p1", "Alice"), ("p2", "ID: p2")]

    def test_filter_by_status(self) -> None:
        assert [t["id"] for t in filter_todos(TODOS, status="open")] == ["a", "d"]
        assert [t["id"] for t in filter_todos(TODOS, status=TodoStatus.DONE)] == ["b"]
        assert len(filter_todos(TODOS)) == 4

    def test_filter_by_assignee(self) -> None:
        assert [t["id"] for t in filter_todos(TODOS, assignee="p1")] == ["a", "d"]
        assert [t["id"] for t in filter_todos(TODOS, assignee=UNASSIGNED)] == ["b"]
        assert [t["id"] for t in filter_todos(TODOS, status="open", assignee="p2")] == []

    def test_sort_ascending_puts_missing_dates_last(self) -> None:
        assert [t["id"] for t in sort_todos(TODOS)] == ["c", "a", "d", "b"]

    def test_sort_descending_puts_missing_dates_first(self) -> None:
        assert [t["id"] for t in sort_todos(TODOS, "desc")] == ["b", "d", "a", "c"]
