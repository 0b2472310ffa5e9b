"""Todo endpoints: overall and personal lists, status updates, assignee directory."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Literal

from fastapi import APIRouter, HTTPException
from postgrest.exceptions import APIError

from src.api.deps import CurrentUser
from src.api.models import MeetingRef, Profile, TodoStatusUpdate, TodoView
from src.extraction.assignees import suggest_profiles
from src.storage.client import get_service_role_client, get_supabase_client
from src.storage.profiles import list_profiles
from src.storage.todos import list_todos, update_todo_status
from src.todos.signals import classify_due_signal
from src.todos.status import TodoStatus, coerce_status, normalize_status
from src.todos.views import assignee_label, filter_todos, format_due_date, sort_todos

logger = logging.getLogger(__name__)

router = APIRouter()


def _with_str_id(row: dict[str, Any]) -> dict[str, Any]:
    return {**row, "id": str(row["id"])} if row.get("id") is not None else dict(row)


def to_todo_view(row: dict[str, Any], today: date) -> TodoView:
    """Build the API representation of a todo row, deriving its due signal."""
    meeting = row.get("meeting")
    assignee = row.get("assignee")
    return TodoView(
        id=str(row["id"]),
        task=row.get("task") or "",
        status=coerce_status(row.get("status")),
        due_date=row.get("due_date"),
        due_date_label=format_due_date(row.get("due_date")),
        due_signal=classify_due_signal(row.get("due_date"), today),
        assignee_id=row.get("assignee_id"),
        assignee=Profile.model_validate(_with_str_id(assignee)) if assignee else None,
        assignee_label=assignee_label(row),
        meeting=MeetingRef.model_validate(_with_str_id(meeting)) if meeting else None,
    )


@router.get("/api/todos", response_model=list[TodoView])
async def all_todos(
    user_id: CurrentUser,
    status: TodoStatus | Literal["all"] = "all",
    assignee: str = "all",
    order: Literal["asc", "desc"] = "asc",
) -> list[TodoView]:
    """All todos, filtered by status and assignee, sorted by due date.

    ``assignee`` is a profile id, ``__unassigned__``, or ``all``.
    """
    rows = list_todos(get_supabase_client())
    rows = sort_todos(filter_todos(rows, status=status, assignee=assignee), order)
    today = date.today()
    return [to_todo_view(r, today) for r in rows]


@router.get("/api/todos/mine", response_model=list[TodoView])
async def my_todos(
    user_id: CurrentUser,
    status: TodoStatus | Literal["all"] = "all",
    order: Literal["asc", "desc"] = "asc",
) -> list[TodoView]:
    """Todos assigned to the current user."""
    rows = list_todos(get_supabase_client(), assignee_id=user_id)
    rows = sort_todos(filter_todos(rows, status=status), order)
    today = date.today()
    return [to_todo_view(r, today) for r in rows]


@router.post("/api/todos/status")
async def set_todo_status(request: TodoStatusUpdate, user_id: CurrentUser) -> dict[str, bool]:
    """Update a todo's status using the service-role client."""
    todo_id = request.id.strip() if isinstance(request.id, str) else ""
    status = normalize_status(request.status) if isinstance(request.status, str) else None
    if not todo_id or status is None:
        raise HTTPException(status_code=400, detail="Invalid todo id or status value")

    admin = get_service_role_client()
    if admin is None:
        raise HTTPException(
            status_code=500,
            detail="SUPABASE_SERVICE_ROLE_KEY is not configured on the server.",
        )

    try:
        update_todo_status(admin, todo_id, status)
    except APIError as exc:
        logger.exception("Status update failed for todo %s", todo_id)
        raise HTTPException(status_code=500, detail=exc.message) from exc

    return {"ok": True}


@router.get("/api/profiles", response_model=list[Profile])
async def profiles(user_id: CurrentUser, q: str | None = None) -> list[Profile]:
    """Assignee directory; with ``q``, at most 8 name suggestions."""
    rows = list_profiles(get_supabase_client())
    if q is not None:
        rows = suggest_profiles(q, rows)
    return [Profile.model_validate(_with_str_id(p)) for p in rows]
