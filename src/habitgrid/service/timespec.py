# SPDX-License-Identifier: MIT

import math
import re
from typing import Optional

SLOT_MINUTES = 15
SLOTS_PER_HOUR = 60 // SLOT_MINUTES
DAY_START_HOUR = 4
# 04:00 through 23:45
SLOTS_PER_DAY = (24 - DAY_START_HOUR) * SLOTS_PER_HOUR

# Checked in order; the first label fragment found wins
NAMED_TIMES: list[tuple[str, Optional[int]]] = [
    ("all day", None),
    ("throughout", None),
    ("am commute", 8),
    ("pm commute", 18),
    ("morning", 7),
    ("afternoon", 14),
    ("evening", 19),
]

_CLOCK_PATTERN = re.compile(r"(\d{1,2})(?::(\d{2}))?\s*(am|pm)?", re.IGNORECASE)
_MINUTES_PATTERN = re.compile(r"(\d+)\s*min", re.IGNORECASE)
_HOURS_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(?:hours?|hrs?)\b", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's)."""
    return math.floor(value + 0.5)


def hour_minute_to_slot(hour: int, minute: int) -> Optional[int]:
    slot = (hour - DAY_START_HOUR) * SLOTS_PER_HOUR + minute // SLOT_MINUTES
    if slot < 0:
        return None
    return slot


def parse_clock(label: str) -> Optional[tuple[int, int]]:
    """
    Find the first `H[:MM] [AM|PM]` in a label and return a 24-hour (hour, minute).

    Returns None when there is no clock time or it is out of range.
    """
    match = _CLOCK_PATTERN.search(label)
    if match is None:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) is not None else 0
    meridiem = match.group(3).lower() if match.group(3) is not None else None

    if meridiem == "pm" and hour != 12:
        hour += 12
    if meridiem == "am" and hour == 12:
        hour = 0

    if hour > 23 or minute > 59:
        return None
    return hour, minute


def parse_start_slot(label: Optional[str]) -> Optional[int]:
    """
    Convert a free-form time label into a slot on the daily timeline.

    Slot 0 is 04:00 and each slot spans 15 minutes. Returns None for labels
    that are not anchored to a time of day ("All day", "Throughout Day",
    unparseable text, or anything before 04:00).
    """
    if not label:
        return None

    lower = label.lower()
    for fragment, hour in NAMED_TIMES:
        if fragment in lower:
            if hour is None:
                return None
            return hour_minute_to_slot(hour, 0)

    clock = parse_clock(label)
    if clock is None:
        return None
    return hour_minute_to_slot(*clock)


def parse_duration_slots(label: Optional[str]) -> int:
    """
    Convert a free-form duration label ("45 min", "1.5 hours", "7.5 hrs") into
    a number of slots. Always at least 1.
    """
    if not label:
        return 1

    minutes_match = _MINUTES_PATTERN.search(label)
    if minutes_match is not None:
        minutes = int(minutes_match.group(1))
        return max(1, math.ceil(minutes / SLOT_MINUTES))

    hours_match = _HOURS_PATTERN.search(label)
    if hours_match is not None:
        hours = float(hours_match.group(1))
        return max(1, round_half_up(hours * SLOTS_PER_HOUR))

    return 1


def slot_to_hour_minute(slot: int) -> tuple[int, int]:
    total_minutes = DAY_START_HOUR * 60 + slot * SLOT_MINUTES
    return (total_minutes // 60) % 24, total_minutes % 60


def slot_to_label(slot: int) -> str:
    hour, minute = slot_to_hour_minute(slot)
    return f"{hour:02d}:{minute:02d}"
