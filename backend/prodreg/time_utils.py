from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional


CALENDAR_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utcnow() -> datetime:
    """Server-side 'now' in UTC (naive, canonical)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 datetime string and normalize to UTC-naive datetime.

    - None / "" -> None
    - "YYYY-MM-DDTHH:MM" (naive) is interpreted as UTC
    - "...Z" or "...+/-HH:MM" is converted to UTC and tzinfo is stripped
    """
    if value is None:
        return None
    s = value.strip()
    if not s:
        return None

    # Accept trailing Z
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)

    # Normalize to UTC-naive
    if dt.tzinfo is None:
        # interpret naive as UTC
        return dt.replace(tzinfo=None)

    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def try_parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Like parse_iso_datetime, but returns None instead of raising on garbage."""
    if not isinstance(value, str):
        return None
    try:
        return parse_iso_datetime(value)
    except ValueError:
        return None


def to_utc_z(dt: Optional[datetime], *, timespec: str = "seconds") -> Optional[str]:
    """
    Serializes datetime to ISO-8601 with trailing 'Z'.
    If dt is naive, it is treated as UTC.
    timespec="milliseconds" keeps sub-second precision (registration instants).
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt_utc = dt.astimezone(timezone.utc)
    return dt_utc.isoformat(timespec=timespec).replace("+00:00", "Z")


def is_calendar_date(value: Optional[str]) -> bool:
    """True for a well-formed YYYY-MM-DD string that names a real day."""
    if not value or not CALENDAR_DATE_RE.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def calendar_date(dt: datetime) -> str:
    """UTC calendar day of dt as YYYY-MM-DD."""
    return dt.strftime("%Y-%m-%d")


def clock_time(dt: datetime) -> str:
    """UTC wall-clock time of dt as HH:MM:SS."""
    return dt.strftime("%H:%M:%S")
