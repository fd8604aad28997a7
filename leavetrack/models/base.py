from __future__ import annotations

from datetime import UTC, date, datetime


def _now_utc() -> datetime:
    """Return the current UTC time."""
    return datetime.now(UTC)


def _today() -> date:
    return date.today()


def completed_months(start: date, end: date) -> int:
    """Whole calendar months elapsed from ``start`` to ``end``, never negative."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(months, 0)


def completed_years(start: date, end: date) -> int:
    """Whole years elapsed from ``start`` to ``end``, never negative."""
    return completed_months(start, end) // 12
