"""Date-only helpers. All lifecycle arithmetic is done on UTC calendar dates."""

from datetime import date, datetime, timezone
from typing import Any, Optional, Union

Instant = Union[datetime, date]


def utc_now() -> datetime:
    """Current instant in UTC."""
    return datetime.now(timezone.utc)


def utc_today(now: Optional[Instant] = None) -> date:
    """
    Project an instant onto its UTC calendar date.

    Aware datetimes are converted to UTC first; naive datetimes are taken
    to already be UTC; plain dates are returned unchanged.
    """
    if now is None:
        now = utc_now()
    if isinstance(now, datetime):
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        return now.date()
    return now


def parse_date(value: Any) -> Optional[date]:
    """
    Parse an ISO 8601 date (or datetime) string into a UTC calendar date.

    Returns:
        date, or None if the value is missing or not a valid ISO date
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return utc_today(datetime.fromisoformat(text))
    except ValueError:
        return None


def days_until(end: Any, now: Optional[Instant] = None) -> Optional[int]:
    """
    Whole calendar days from the UTC date of ``now`` to ``end``.

    Time of day never matters: an end date equal to today yields 0 and
    past dates yield negative counts.

    Returns:
        Signed day count, or None when ``end`` is missing or invalid
    """
    target = utc_today(end) if isinstance(end, date) else parse_date(end)
    if target is None:
        return None
    return (target - utc_today(now)).days


def format_friendly_date(value: Optional[str] = None) -> str:
    """
    Render a "YYYY-MM-DD" string as e.g. "June 1, 2025".

    Only the calendar fields of the string are used, so the local timezone
    can never shift the day. Missing values give ""; anything that is not a
    valid three-part date is returned unchanged.
    """
    if not value:
        return ""

    parts = value.split("-")
    if len(parts) != 3:
        return value

    try:
        year, month, day = (int(part) for part in parts)
        parsed = date(year, month, day)
    except ValueError:
        return value

    return f"{parsed:%B} {parsed.day}, {parsed.year}"
