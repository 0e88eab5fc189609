"""Date and time formatting utilities for Saigai Watch.

The feed reports event times as epoch milliseconds; the UI shows them as
RFC 1123 UTC strings. The query start time is a bare UTC date; the footer
clock is shown in a local (or configured) time zone.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from email.utils import format_datetime
from typing import Optional

from dateutil import parser as dateutil_parser
from dateutil import tz

UTC = tz.UTC


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime, or convert an aware one to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_local(dt: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """Convert ``dt`` to ``zone``, or to the machine's local zone when omitted.

    Naive values are taken as UTC first.
    """
    return ensure_utc(dt).astimezone(zone or tz.tzlocal())


def start_time_param(now: Optional[datetime] = None, hours: int = 48) -> str:
    """Compute the feed ``starttime`` parameter.

    Args:
        now: Reference time (defaults to the current UTC time).
        hours: Lookback window in hours.

    Returns:
        UTC date string ``YYYY-MM-DD`` of ``now - hours``.
    """
    reference = ensure_utc(now) if now is not None else utc_now()
    return (reference - timedelta(hours=hours)).strftime("%Y-%m-%d")


def epoch_ms_to_datetime(time_ms: float) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(time_ms / 1000.0, tz=UTC)


def format_utc(time_ms: float) -> str:
    """Format epoch milliseconds as an RFC 1123 UTC string.

    Example:
        >>> format_utc(1705320000000)
        'Mon, 15 Jan 2024 12:00:00 GMT'
    """
    # usegmt requires the stdlib UTC singleton, not dateutil's tzutc
    return format_datetime(epoch_ms_to_datetime(time_ms).astimezone(timezone.utc), usegmt=True)


def format_clock_time(dt: datetime, locale: str = "en") -> str:
    """Format a wall-clock time for the footer ``Last updated`` line.

    English uses a 12-hour clock (``3:04:05 PM``); Japanese uses 24-hour
    (``15:04:05``).
    """
    if locale == "ja":
        return dt.strftime("%H:%M:%S")
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.strftime('%M:%S')} {suffix}"


def parse_datetime(raw: str) -> datetime:
    """Parse a user-supplied date/time string into an aware UTC datetime.

    Naive values are interpreted as UTC.

    Raises:
        ValueError: If the string cannot be parsed.
    """
    try:
        parsed = dateutil_parser.parse(raw.strip())
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Unparseable date/time: {raw!r}") from exc
    return ensure_utc(parsed)
