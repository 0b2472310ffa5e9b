"""Todo status vocabulary and normalisation of legacy/alias values."""

from __future__ import annotations

from enum import StrEnum


class TodoStatus(StrEnum):
    """Status values accepted by the todos table."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    DONE = "done"


_IN_PROGRESS_ALIASES = {"in_progress", "in-progress", "inprogress", "doing"}

# Labels written by older clients
_LEGACY_LABELS = {"進行中": TodoStatus.IN_PROGRESS, "完了": TodoStatus.DONE}


def normalize_status(raw: str) -> TodoStatus | None:
    """Map *raw* to a TodoStatus, or None if it is not a recognised value."""
    key = raw.strip().lower()
    if key in _IN_PROGRESS_ALIASES:
        return TodoStatus.IN_PROGRESS
    if key == "done":
        return TodoStatus.DONE
    if key == "open":
        return TodoStatus.OPEN
    return None


def coerce_status(raw: object) -> TodoStatus:
    """Like normalize_status, but unknown values fall back to ``open``."""
    text = str(raw) if raw is not None else ""
    if text.strip() in _LEGACY_LABELS:
        return _LEGACY_LABELS[text.strip()]
    return normalize_status(text) or TodoStatus.OPEN
