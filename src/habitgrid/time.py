# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Optional

import pendulum

_DATE_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def now_iso_str() -> str:
    return pendulum.now("UTC").isoformat()


def as_pendulum_date(value: datetime.date) -> pendulum.Date:
    if isinstance(value, pendulum.Date):
        return value
    return pendulum.date(value.year, value.month, value.day)


def date_to_key(date: datetime.date) -> str:
    """Convert a calendar date to its 'YYYY-MM-DD' day key (no timezone shift)."""
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def date_from_key(key: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' day key. Raises ValueError when malformed."""
    match = _DATE_KEY_PATTERN.match(key.strip())
    if match is None:
        raise ValueError(f"Invalid date key: {key!r}")
    year, month, day = (int(group) for group in match.groups())
    return pendulum.date(year, month, day)


def date_from_key_optional(key: Optional[str]) -> Optional[pendulum.Date]:
    """Parse a day key, returning None for missing or malformed input."""
    if not key:
        return None
    try:
        return date_from_key(key)
    except (ValueError, TypeError):
        return None


def date_to_display_str(date: datetime.date) -> str:
    return as_pendulum_date(date).format("YYYY-MM-DD ddd")


def date_range_back(end: datetime.date, days: int) -> list[pendulum.Date]:
    """Return `days` consecutive dates ending at `end` (oldest first)."""
    end_date = as_pendulum_date(end)
    return [end_date.subtract(days=offset) for offset in range(days - 1, -1, -1)]
