"""Match todo assignee names against the profile directory."""

from __future__ import annotations

import unicodedata
from dataclasses import replace
from typing import Any

from src.extraction.models import ParsedMeetingResult

Profile = dict[str, Any]  # {"id", "full_name", "username"}


def _norm(text: str) -> str:
    return unicodedata.normalize("NFKC", text).strip().lower()


def display_name(profile: Profile) -> str:
    """Full name, falling back to username."""
    return (profile.get("full_name") or profile.get("username") or "").strip()


def suggest_profiles(query: str, profiles: list[Profile], limit: int = 8) -> list[Profile]:
    """Return profiles whose display name contains *query* (width/case-insensitive)."""
    needle = _norm(query or "")
    return [p for p in profiles if needle in _norm(display_name(p))][:limit]


def resolve_assignees(result: ParsedMeetingResult, profiles: list[Profile]) -> ParsedMeetingResult:
    """Fill ``assignee_id`` on todos whose assignee exactly names a known profile.

    Both full names and usernames are matched. Todos that already carry an
    id, or whose name matches nothing, are returned unchanged.
    """
    by_name: dict[str, str] = {}
    for profile in profiles:
        for name in (profile.get("full_name"), profile.get("username")):
            if name and _norm(name):
                by_name.setdefault(_norm(name), str(profile["id"]))

    todos = []
    for todo in result.todos:
        if not todo.assignee_id and todo.assignee:
            profile_id = by_name.get(_norm(todo.assignee))
            if profile_id:
                todo = replace(todo, assignee_id=profile_id)
        todos.append(todo)
    return replace(result, todos=todos)
