"""Profile (assignee directory) lookups."""

from __future__ import annotations

from typing import Any, cast

from supabase import Client


def list_profiles(client: Client) -> list[dict[str, Any]]:
    """All profiles ordered by full name."""
    result = client.table("profiles").select("id, full_name, username").order("full_name").execute()
    return cast(list[dict[str, Any]], result.data)


def get_profiles(client: Client, ids: list[str]) -> dict[str, dict[str, Any]]:
    """Profiles for *ids*, keyed by id. Empty input makes no request."""
    if not ids:
        return {}
    result = client.table("profiles").select("id, full_name, username").in_("id", ids).execute()
    return {p["id"]: p for p in cast(list[dict[str, Any]], result.data or [])}


def attach_assignees(client: Client, todos: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Add an ``assignee`` profile (or None) to each todo row, fetched in one query."""
    ids = list(dict.fromkeys(t["assignee_id"] for t in todos if t.get("assignee_id")))
    profiles = get_profiles(client, ids)
    for todo in todos:
        assignee_id = todo.get("assignee_id")
        todo["assignee"] = profiles.get(assignee_id) if assignee_id else None
    return todos
