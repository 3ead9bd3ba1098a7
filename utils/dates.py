# utils/dates.py
"""
Date helpers shared by the server and the client.

Booking dates are compared as ``YYYY-MM-DD`` strings in one fixed UTC offset,
whatever form they were stored or sent in.
"""
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

from config import BOOKING_UTC_OFFSET

_OFFSET_RE = re.compile(r"^([+-])(\d{1,2}):?(\d{2})$")


def parse_utc_offset(value: str) -> timezone:
    """Turn ``"+05:30"`` style text into a fixed ``timezone``."""
    match = _OFFSET_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid UTC offset: {value!r}")
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == "-" else delta)


BOOKING_TZ = parse_utc_offset(BOOKING_UTC_OFFSET)


def normalize_date(value: Any, tz: timezone = BOOKING_TZ) -> str:
    """
    Canonical ``YYYY-MM-DD`` key for a booking date.

    Naive datetime objects are taken as UTC (that is how pymongo hands them
    back); date-time text without an offset is read in ``tz``.
    Raises ValueError when the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(tz).strftime("%Y-%m-%d")
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}")

    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text).isoformat()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        # text without an offset is local wall-clock time
        parsed = parsed.replace(tzinfo=tz)
    return normalize_date(parsed, tz)


def try_normalize_date(value: Any, tz: timezone = BOOKING_TZ) -> Optional[str]:
    try:
        return normalize_date(value, tz)
    except ValueError:
        return None


def today_in_zone(tz: timezone = BOOKING_TZ) -> date:
    return datetime.now(tz).date()


def isoformat_or_none(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    return str(value)
