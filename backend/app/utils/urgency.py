"""
Due-date urgency for assignments.

Urgency is measured in calendar days, not elapsed 24 hour periods: anything
due today is 0 days away regardless of the current time of day.
"""
from datetime import date, datetime, time
from typing import Optional, Union

from app.schemas.assignment import UrgencyInfo

URGENT_WITHIN_DAYS = 3

DueAt = Union[datetime, date, str, None]


def parse_due_at(value: DueAt) -> Optional[datetime]:
    """Coerce a due date into a datetime, or None when it can't be read."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def calendar_days_between(start: datetime, end: datetime) -> int:
    """Whole calendar days from start to end, ignoring the time of day."""
    if end.tzinfo is not None:
        # Compare both dates on the wall clock of `start`
        end = end.astimezone(start.tzinfo) if start.tzinfo is not None else end.astimezone()
    return (end.date() - start.date()).days


def get_urgency_info(
    due_at: DueAt,
    status: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Optional[UrgencyInfo]:
    """Return urgency metadata for a due date and status.

    Completed assignments, and assignments without a readable due date,
    have no urgency at all.
    """
    if not due_at or status == "done":
        return None

    due_date = parse_due_at(due_at)
    if due_date is None:
        return None

    if now is None:
        now = datetime.now().astimezone()

    days_until_due = calendar_days_between(now, due_date)
    return UrgencyInfo(
        days_until_due=days_until_due,
        is_urgent=days_until_due <= URGENT_WITHIN_DAYS,
        is_overdue=days_until_due < 0,
    )
