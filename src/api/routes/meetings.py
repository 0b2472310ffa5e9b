"""Meeting endpoints: save a reviewed analysis, list, and detail views."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, HTTPException

from src.api.deps import CurrentUser
from src.api.models import (
    MeetingCreateRequest,
    MeetingCreateResponse,
    MeetingDetail,
    MeetingSummary,
)
from src.api.routes.todos import to_todo_view
from src.storage.client import get_supabase_client
from src.storage.meetings import get_meeting, list_meetings, save_meeting

router = APIRouter()


@router.post("/api/meetings", response_model=MeetingCreateResponse, status_code=201)
async def create_meeting(request: MeetingCreateRequest, user_id: CurrentUser) -> MeetingCreateResponse:
    """Persist a meeting with its decisions and todos."""
    client = get_supabase_client()
    meeting_id = save_meeting(
        client,
        user_id,
        request.title,
        request.meeting_date.isoformat(),
        request.transcript,
        request.result.to_result(),
    )
    return MeetingCreateResponse(meeting_id=meeting_id)


@router.get("/api/meetings", response_model=list[MeetingSummary])
async def meetings(user_id: CurrentUser) -> list[MeetingSummary]:
    """List meetings, most recent meeting date first."""
    client = get_supabase_client()
    return [
        MeetingSummary(id=str(m["id"]), title=m.get("title"), meeting_date=m.get("meeting_date"))
        for m in list_meetings(client)
    ]


@router.get("/api/meetings/{meeting_id}", response_model=MeetingDetail)
async def meeting_detail(meeting_id: str, user_id: CurrentUser) -> MeetingDetail:
    """Get a meeting with its summary, decisions, and todos."""
    client = get_supabase_client()
    m = get_meeting(client, meeting_id)
    if m is None:
        raise HTTPException(status_code=404, detail="Meeting not found")

    today = date.today()
    return MeetingDetail(
        id=str(m["id"]),
        title=m.get("title"),
        meeting_date=m.get("meeting_date"),
        transcript=m.get("transcript"),
        summary=[str(s) for s in m["summary"]],
        decisions=m["decisions"],
        todos=[to_todo_view(t, today) for t in m["todos"]],
    )
