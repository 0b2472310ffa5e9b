"""Supabase storage helpers for todos."""

from __future__ import annotations

from typing import Any, cast

from supabase import Client

from src.storage.profiles import attach_assignees
from src.todos.status import TodoStatus, coerce_status


def list_todos(client: Client, assignee_id: str | None = None) -> list[dict[str, Any]]:
    """Todos with their meeting and assignee, earliest due date first.

    Args:
        client: Supabase client.
        assignee_id: Restrict to one assignee (the "my todos" view).
    """
    query = client.table("todos").select(
        "id, task, status, due_date, assignee_id, meeting:meetings(id, title, meeting_date)"
    )
    if assignee_id:
        query = query.eq("assignee_id", assignee_id)
    result = query.order("due_date").execute()

    todos = cast(list[dict[str, Any]], result.data or [])
    for todo in todos:
        # Older rows may hold aliases such as "doing"
        todo["status"] = coerce_status(todo.get("status")).value
    return attach_assignees(client, todos)


def update_todo_status(client: Client, todo_id: str, status: TodoStatus) -> None:
    """Set the status of one todo."""
    client.table("todos").update({"status": status.value}).eq("id", todo_id).execute()
