"""Supabase storage helpers for meetings, decisions, and their todos."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, cast

from supabase import Client

from src.extraction.models import ParsedMeetingResult
from src.storage.profiles import attach_assignees
from src.todos.status import TodoStatus, coerce_status

logger = logging.getLogger(__name__)


def _meeting_date_iso(meeting_date: str) -> str | None:
    """Convert a date-only ``YYYY-MM-DD`` string to an ISO timestamp at local midnight."""
    if not meeting_date or not meeting_date.strip():
        return None
    day = datetime.fromisoformat(meeting_date.strip())
    return day.replace(hour=0, minute=0, second=0, microsecond=0).astimezone().isoformat()


def _blank_to_none(value: str | None) -> str | None:
    return value if value and value.strip() else None


def decision_rows(meeting_id: str, result: ParsedMeetingResult) -> list[dict[str, Any]]:
    """Trimmed, non-empty decisions as rows for the decisions table."""
    contents = (d.strip() for d in result.decisions if d)
    return [{"meeting_id": meeting_id, "content": c} for c in contents if c]


def todo_rows(meeting_id: str, result: ParsedMeetingResult) -> list[dict[str, Any]]:
    """Todos with a non-empty task as rows for the todos table, status ``open``."""
    rows: list[dict[str, Any]] = []
    for todo in result.todos:
        task = (todo.task or "").strip()
        if not task:
            continue
        rows.append(
            {
                "meeting_id": meeting_id,
                "assignee_id": _blank_to_none(todo.assignee_id),
                "task": task,
                "due_date": _blank_to_none(todo.due_date),
                "status": TodoStatus.OPEN.value,
            }
        )
    return rows


def save_meeting(
    client: Client,
    user_id: str,
    title: str,
    meeting_date: str,
    transcript: str,
    result: ParsedMeetingResult,
) -> str:
    """Store a reviewed meeting: meeting row, then decisions, then todos.

    Args:
        client: Supabase client acting for the user.
        user_id: Recorded as ``created_by`` (required by row-level security).
        title: Meeting title.
        meeting_date: Date-only string (``YYYY-MM-DD``).
        transcript: Full transcript text.
        result: The edited analysis result.

    Returns:
        The newly created meeting ID.
    """
    inserted = (
        client.table("meetings")
        .insert(
            {
                "title": title,
                "meeting_date": _meeting_date_iso(meeting_date),
                "transcript": transcript,
                "summary": list(result.summary),
                "created_by": user_id,
            }
        )
        .execute()
    )
    meeting_id = str(inserted.data[0]["id"])

    decisions = decision_rows(meeting_id, result)
    if decisions:
        client.table("decisions").insert(decisions).execute()

    todos = todo_rows(meeting_id, result)
    if todos:
        client.table("todos").insert(todos).execute()

    logger.info(
        "Saved meeting %s with %d decisions and %d todos", meeting_id, len(decisions), len(todos)
    )
    return meeting_id


def list_meetings(client: Client, limit: int = 50) -> list[dict[str, Any]]:
    """Most recent meetings first."""
    result = (
        client.table("meetings")
        .select("id, title, meeting_date")
        .order("meeting_date", desc=True)
        .limit(limit)
        .execute()
    )
    return cast(list[dict[str, Any]], result.data)


def get_meeting(client: Client, meeting_id: str) -> dict[str, Any] | None:
    """Meeting with its decisions and todos (assignee profiles merged), or None."""
    result = (
        client.table("meetings")
        .select("id, title, meeting_date, transcript, summary")
        .eq("id", meeting_id)
        .execute()
    )
    rows = cast(list[dict[str, Any]], result.data)
    if not rows:
        return None
    meeting = rows[0]

    decisions = (
        client.table("decisions")
        .select("content")
        .eq("meeting_id", meeting_id)
        .order("id")
        .execute()
    )
    todos_result = (
        client.table("todos")
        .select("id, task, status, due_date, assignee_id")
        .eq("meeting_id", meeting_id)
        .order("due_date")
        .execute()
    )
    todos = cast(list[dict[str, Any]], todos_result.data or [])
    for todo in todos:
        todo["status"] = coerce_status(todo.get("status")).value

    return {
        **meeting,
        "summary": meeting.get("summary") or [],
        "decisions": [
            d["content"] for d in cast(list[dict[str, Any]], decisions.data or []) if d.get("content")
        ],
        "todos": attach_assignees(client, todos),
    }
