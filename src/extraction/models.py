"""Data models for meeting analysis results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class TodoDraft:
    """An editable action item produced by analysis, not yet persisted."""

    assignee: str = ""
    assignee_id: str | None = None  # set only when resolved against profiles
    due_date: str = ""  # "YYYY-MM-DD" or ""
    task: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "assignee": self.assignee,
            "due_date": self.due_date,
            "task": self.task,
        }
        if self.assignee_id:
            data["assignee_id"] = self.assignee_id
        return data


@dataclass
class ParsedMeetingResult:
    """Summary bullets, decisions, and todo drafts for one meeting."""

    summary: list[str] = field(default_factory=list)
    decisions: list[str] = field(default_factory=list)
    todos: list[TodoDraft] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": list(self.summary),
            "decisions": list(self.decisions),
            "todos": [t.to_dict() for t in self.todos],
        }


@dataclass(frozen=True)
class Extraction:
    """Outcome of reading a language-model answer.

    ``parsed`` is None when no structured result could be recovered; callers
    then show ``raw_text`` to the user instead.
    """

    parsed: ParsedMeetingResult | None
    raw_text: str

    @property
    def ok(self) -> bool:
        return self.parsed is not None
