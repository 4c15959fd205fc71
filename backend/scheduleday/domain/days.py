"""Calendar-day helpers for schedule filtering.

Every value is resolved against one explicit timezone so that both sides of
a same-day comparison share the same day boundaries.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Any

from dateutil import parser as dateparser

# Missing date parts resolve to the start of the period, never to today
_PARSE_DEFAULT = datetime(1970, 1, 1)


def parse_day(value: Any, tz: tzinfo = timezone.utc) -> datetime | None:
    """Convert ``value`` into an aware datetime in ``tz``.

    Accepts datetimes, dates, epoch milliseconds and textual dates.
    Returns None when the value cannot be interpreted.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _localize(value, tz)
    if isinstance(value, date):
        return _localize(datetime.combine(value, time.min), tz)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=tz)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = dateparser.parse(text, default=_PARSE_DEFAULT)
        except (ValueError, OverflowError):
            return None
        return _localize(parsed, tz)
    return None


def is_valid_day(value: datetime | None) -> bool:
    return value is not None


def is_same_day(left: datetime, right: datetime, tz: tzinfo = timezone.utc) -> bool:
    try:
        return left.astimezone(tz).date() == right.astimezone(tz).date()
    except (OverflowError, ValueError):
        return False


def _localize(value: datetime, tz: tzinfo) -> datetime | None:
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    try:
        return value.astimezone(tz)
    except (OverflowError, ValueError):
        # Instants near datetime.min/max cannot be shifted into tz
        return None
