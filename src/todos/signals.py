"""Due-date urgency signals for todos."""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

# Due today, tomorrow, or the day after counts as "soon".
DUE_SOON_DAYS = 2


class DueSignal(StrEnum):
    """Visual urgency of a todo's due date."""

    RED = "red"  # overdue
    YELLOW = "yellow"  # due soon
    GREEN = "green"  # due later
    GRAY = "gray"  # unset or unrecognised


def _local_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def parse_due_date(value: str | date | datetime | None) -> date | None:
    """Return the local calendar day of *value*, or None if it is empty or unparseable."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return _local_day(value)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return _local_day(datetime.fromisoformat(value.strip()))
    except ValueError:
        return None


def classify_due_signal(
    due: str | date | datetime | None,
    today: date | datetime | None = None,
) -> DueSignal:
    """Classify *due* relative to *today* (defaults to the local date).

    Only calendar days are compared; times of day are ignored.
    """
    due_day = parse_due_date(due)
    if due_day is None:
        return DueSignal.GRAY

    current = _local_day(today) if today is not None else date.today()
    if due_day < current:
        return DueSignal.RED
    if (due_day - current).days <= DUE_SOON_DAYS:
        return DueSignal.YELLOW
    return DueSignal.GREEN
