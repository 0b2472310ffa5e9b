"""List-view helpers for todo rows: filtering, sorting, and display labels.

Rows are the dicts returned by ``src.storage.todos.list_todos``:
``{"id", "task", "status", "due_date", "assignee_id", "assignee", "meeting"}``.
"""

from __future__ import annotations

import math
from typing import Any, Literal

from src.todos.signals import parse_due_date
from src.todos.status import TodoStatus

UNASSIGNED = "__unassigned__"

SortOrder = Literal["asc", "desc"]


def format_due_date(value: str | None) -> str:
    """Render a stored date as ``YYYY/MM/DD`` ("-" if empty, raw text if unparseable)."""
    if not value:
        return "-"
    day = parse_due_date(value)
    if day is None:
        return value
    return day.strftime("%Y/%m/%d")


def assignee_label(todo: dict[str, Any]) -> str:
    """Human-readable assignee for a todo row."""
    assignee_id = todo.get("assignee_id")
    if not assignee_id:
        return "Unassigned"
    profile = todo.get("assignee") or {}
    return profile.get("full_name") or profile.get("username") or f"ID: {assignee_id}"


def assignee_options(todos: list[dict[str, Any]]) -> list[tuple[str, str]]:
    """Distinct ``(assignee_id, label)`` pairs in first-seen order."""
    seen: dict[str, str] = {}
    for todo in todos:
        assignee_id = todo.get("assignee_id")
        if assignee_id and assignee_id not in seen:
            seen[assignee_id] = assignee_label(todo)
    return list(seen.items())


def filter_todos(
    todos: list[dict[str, Any]],
    status: TodoStatus | str = "all",
    assignee: str = "all",
) -> list[dict[str, Any]]:
    """Keep todos matching *status* and *assignee*.

    Args:
        status: A TodoStatus value or ``"all"``.
        assignee: A profile id, ``"__unassigned__"``, or ``"all"``.
    """
    result = todos if status == "all" else [t for t in todos if t.get("status") == status]
    if assignee == "all":
        return list(result)
    if assignee == UNASSIGNED:
        return [t for t in result if not t.get("assignee_id")]
    return [t for t in result if t.get("assignee_id") == assignee]


def _due_key(todo: dict[str, Any]) -> float:
    day = parse_due_date(todo.get("due_date"))
    if day is None:
        return math.inf
    return float(day.toordinal())


def sort_todos(todos: list[dict[str, Any]], order: SortOrder = "asc") -> list[dict[str, Any]]:
    """Sort by due date. Todos without one sort last ascending, first descending."""
    return sorted(todos, key=_due_key, reverse=order == "desc")
