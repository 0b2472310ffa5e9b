"""Pydantic request/response schemas for the Meeting Notes API."""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field

from src.extraction.models import ParsedMeetingResult, TodoDraft
from src.todos.signals import DueSignal
from src.todos.status import TodoStatus


class TodoDraftModel(BaseModel):
    """An editable todo as sent to and from the review screen."""

    assignee: str = ""
    assignee_id: str | None = None
    due_date: str = ""
    task: str = ""

    def to_draft(self) -> TodoDraft:
        return TodoDraft(
            assignee=self.assignee,
            assignee_id=self.assignee_id,
            due_date=self.due_date,
            task=self.task,
        )


class ParsedResultModel(BaseModel):
    """Summary, decisions, and todos for one meeting."""

    summary: list[str] = []
    decisions: list[str] = []
    todos: list[TodoDraftModel] = []

    @classmethod
    def from_result(cls, result: ParsedMeetingResult) -> ParsedResultModel:
        return cls.model_validate(result.to_dict())

    def to_result(self) -> ParsedMeetingResult:
        return ParsedMeetingResult(
            summary=list(self.summary),
            decisions=list(self.decisions),
            todos=[t.to_draft() for t in self.todos],
        )


class AnalyzeRequest(BaseModel):
    """Request body for POST /api/analyze."""

    title: str = ""
    meeting_date: str = ""
    transcript: str
    resolve_assignees: bool = True


class AnalyzeResponse(BaseModel):
    """Response body for POST /api/analyze.

    ``parsed`` is null when the model's answer could not be read as JSON; the
    client then shows ``raw_text``.
    """

    parsed: ParsedResultModel | None = None
    raw_text: str


class AnalyzeStatus(BaseModel):
    """Response body for GET /api/analyze."""

    ok: bool = True
    has_key: bool


class MeetingCreateRequest(BaseModel):
    """Request body for POST /api/meetings."""

    title: str = Field(min_length=1)
    meeting_date: date
    transcript: str = ""
    result: ParsedResultModel


class MeetingCreateResponse(BaseModel):
    meeting_id: str


class MeetingSummary(BaseModel):
    """Summary representation of a meeting for list views."""

    id: str
    title: str | None = None
    meeting_date: str | None = None


class Profile(BaseModel):
    id: str
    full_name: str | None = None
    username: str | None = None


class MeetingRef(BaseModel):
    id: str | None = None
    title: str | None = None
    meeting_date: str | None = None


class TodoView(BaseModel):
    """A stored todo with display fields derived at request time."""

    id: str
    task: str
    status: TodoStatus
    due_date: str | None = None
    due_date_label: str = "-"
    due_signal: DueSignal = DueSignal.GRAY
    assignee_id: str | None = None
    assignee: Profile | None = None
    assignee_label: str = "Unassigned"
    meeting: MeetingRef | None = None


class MeetingDetail(BaseModel):
    """Full meeting detail including decisions and todos."""

    id: str
    title: str | None = None
    meeting_date: str | None = None
    transcript: str | None = None
    summary: list[str] = []
    decisions: list[str] = []
    todos: list[TodoView] = []


class TodoStatusUpdate(BaseModel):
    """Request body for POST /api/todos/status. Values are validated by the route."""

    id: Any = None
    status: Any = None


class SearchRequest(BaseModel):
    q: str = ""


class SearchHit(BaseModel):
    type: Literal["meeting", "decision", "todo"]
    id: str
    title: str | None = None
    meeting_date: str | None = None
    content: str | None = None
    task: str | None = None
    status: str | None = None
    meeting_id: str | None = None
    meeting_title: str | None = None


class SearchResponse(BaseModel):
    hits: list[SearchHit]


class Credentials(BaseModel):
    """Request body for the auth pass-through endpoints."""

    email: str
    password: str


class AuthResponse(BaseModel):
    user_id: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    confirmation_required: bool = False
