"""Keyword search across meetings, decisions, and todos."""

from __future__ import annotations

import logging
from typing import Any, cast

from postgrest.exceptions import APIError
from supabase import Client

logger = logging.getLogger(__name__)

MEETING_LIMIT = 10
DECISION_LIMIT = 20
TODO_LIMIT = 20


def _meeting_title(row: dict[str, Any]) -> str | None:
    meeting = row.get("meetings") or {}
    return meeting.get("title")


def _search_meetings(client: Client, pattern: str) -> list[dict[str, Any]]:
    result = (
        client.table("meetings")
        .select("id, title, meeting_date")
        .ilike("title", pattern)
        .order("meeting_date", desc=True)
        .limit(MEETING_LIMIT)
        .execute()
    )
    return [
        {
            "type": "meeting",
            "id": str(m["id"]),
            "title": m.get("title"),
            "meeting_date": m.get("meeting_date"),
        }
        for m in cast(list[dict[str, Any]], result.data or [])
    ]


def _search_decisions(client: Client, pattern: str) -> list[dict[str, Any]]:
    result = (
        client.table("decisions")
        .select("id, content, meeting_id, meetings(title)")
        .ilike("content", pattern)
        .limit(DECISION_LIMIT)
        .execute()
    )
    return [
        {
            "type": "decision",
            "id": str(d["id"]),
            "content": d.get("content") or "",
            "meeting_id": str(d["meeting_id"]),
            "meeting_title": _meeting_title(d),
        }
        for d in cast(list[dict[str, Any]], result.data or [])
    ]


def _search_todos(client: Client, pattern: str) -> list[dict[str, Any]]:
    result = (
        client.table("todos")
        .select("id, task, status, meeting_id, meetings(title)")
        .ilike("task", pattern)
        .limit(TODO_LIMIT)
        .execute()
    )
    return [
        {
            "type": "todo",
            "id": str(t["id"]),
            "task": t.get("task") or "",
            "status": t.get("status"),
            "meeting_id": str(t["meeting_id"]),
            "meeting_title": _meeting_title(t),
        }
        for t in cast(list[dict[str, Any]], result.data or [])
    ]


def search(client: Client, keyword: str) -> list[dict[str, Any]]:
    """Case-insensitive substring search; meetings first, then decisions, then todos.

    A blank keyword returns no hits. A table whose query fails is logged and
    skipped so the others still contribute.
    """
    keyword = (keyword or "").strip()
    if not keyword:
        return []

    pattern = f"%{keyword}%"
    hits: list[dict[str, Any]] = []
    for name, run in (
        ("meetings", _search_meetings),
        ("decisions", _search_decisions),
        ("todos", _search_todos),
    ):
        try:
            hits.extend(run(client, pattern))
        except APIError as exc:
            logger.warning("Search over %s failed: %s", name, exc.message)
    return hits
