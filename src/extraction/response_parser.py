"""Recover a structured meeting result from a free-text language-model answer.

The model is asked for bare JSON but frequently wraps it in a Markdown fence
or prefixes it with prose. Candidates are tried in order:

1. the whole answer,
2. the body of a ```json fence (or, failing that, any ``` fence),
3. the text from the first ``{`` to a ``}`` that ends the answer.

The first candidate that passes schema validation wins. Nothing here raises
on bad input; an unrecoverable answer yields ``Extraction(parsed=None, ...)``.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from src.extraction.models import Extraction, ParsedMeetingResult, TodoDraft

_JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)```", re.IGNORECASE)
_ANY_FENCE = re.compile(r"```\s*([\s\S]*?)```")
_TRAILING_OBJECT = re.compile(r"\{[\s\S]*\}$")


class _MeetingPayload(BaseModel):
    """Expected top-level shape: three arrays, element types checked later."""

    summary: list[Any]
    decisions: list[Any]
    todos: list[Any]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _to_todo(item: Any) -> TodoDraft | None:
    if isinstance(item, str):
        return TodoDraft(task=item)
    if not isinstance(item, dict):
        return None
    assignee_id = item.get("assignee_id")
    return TodoDraft(
        assignee=_as_text(item.get("assignee")),
        assignee_id=assignee_id if isinstance(assignee_id, str) and assignee_id else None,
        due_date=_as_text(item.get("due_date")),
        task=_as_text(item.get("task")),
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _validate(candidate: str) -> ParsedMeetingResult | None:
    """Parse *candidate* as strict JSON and validate it against the meeting schema."""
    try:
        obj = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if not isinstance(obj, dict):
        return None

    try:
        payload = _MeetingPayload.model_validate(obj, strict=True)
    except ValidationError:
        return None

    todos = [todo for todo in (_to_todo(t) for t in payload.todos) if todo is not None]
    return ParsedMeetingResult(
        summary=[_as_text(s) for s in payload.summary],
        decisions=[_as_text(d) for d in payload.decisions],
        todos=todos,
    )


def _fenced_body(text: str) -> str | None:
    match = _JSON_FENCE.search(text) or _ANY_FENCE.search(text)
    return match.group(1) if match else None


def extract_meeting_result(answer: Any) -> Extraction:
    """Extract summary, decisions, and todos from a language-model answer.

    Args:
        answer: The model's answer. Anything other than a string is treated
            as an empty answer.

    Returns:
        An Extraction whose ``raw_text`` is the trimmed answer and whose
        ``parsed`` is the recovered result, or None if every attempt failed.
    """
    text = answer.strip() if isinstance(answer, str) else ""
    if not text:
        return Extraction(parsed=None, raw_text="")

    direct = _validate(text)
    if direct is not None:
        return Extraction(parsed=direct, raw_text=text)

    body = _fenced_body(text)
    if body:
        fenced = _validate(body.strip())
        if fenced is not None:
            return Extraction(parsed=fenced, raw_text=text)

    brace = _TRAILING_OBJECT.search(text)
    if brace:
        trailing = _validate(brace.group(0))
        if trailing is not None:
            return Extraction(parsed=trailing, raw_text=text)

    return Extraction(parsed=None, raw_text=text)
