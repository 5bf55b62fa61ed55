"""UTC calendar-day helpers shared by the availability services.

Every instant crossing into the availability engine is reduced to a plain
``date`` in UTC here, so the per-night loop only ever compares calendar days.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, date, datetime, time, timedelta


def to_calendar_day(value: date | datetime) -> date:
    """Return the UTC calendar day of ``value``.

    Naive datetimes are taken to already be in UTC. Plain dates pass through.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(UTC).date()
    return value


def utc_midnight(day: date) -> datetime:
    """Return the aware instant at the start of ``day`` in UTC."""
    return datetime.combine(day, time.min, tzinfo=UTC)


def today_utc(now: datetime | None = None) -> date:
    """Return the current UTC calendar day."""
    return to_calendar_day(now or datetime.now(UTC))


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield each day in ``[start, end)``."""
    current = start
    while current < end:
        yield current
        current += timedelta(days=1)


def day_span(start: date, end: date) -> int:
    """Number of nights between two calendar days."""
    return (end - start).days


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def first_of_next_month(day: date) -> date:
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def month_window(month: date, today: date) -> tuple[date, date]:
    """Return the bookable ``[start, end)`` range for a calendar month.

    The current month starts today rather than on the 1st; other months span
    their full length. ``end`` is the first day of the following month.
    """
    start = first_of_month(month)
    end = first_of_next_month(month)
    if start == first_of_month(today):
        start = today
    return start, end
