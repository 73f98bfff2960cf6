"""
Timestamp helpers for request bookkeeping.

Stored timestamps use a fixed-width UTC format so that string order matches
chronological order.
"""

import re
from datetime import datetime, timezone
from typing import Optional

ISO_LIKE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(ts: datetime) -> str:
    """
    Render a datetime as e.g. ``2026-01-12T07:00:00.000Z``.

    Naive datetimes are assumed to already be UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    ts = ts.astimezone(timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse a stored timestamp, returning None if it is not ISO-8601."""
    try:
        ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def is_iso_like(value: object) -> bool:
    """True if value starts with ``YYYY-MM-DDTHH:MM``; no calendar checks."""
    return isinstance(value, str) and bool(ISO_LIKE_PATTERN.match(value))
