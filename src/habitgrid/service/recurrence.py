# SPDX-License-Identifier: MIT

import datetime
from enum import StrEnum
from typing import Optional

from habitgrid.model.schedulable import RecurringType, Schedulable
from habitgrid.time import date_from_key_optional, date_to_key

ALL_WEEKDAYS: frozenset[int] = frozenset(range(7))
WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
WEEKDAY_LETTERS = ["S", "M", "T", "W", "T", "F", "S"]


class OneTimePolicy(StrEnum):
    """How one-time (non recurring) activities are shown on days other than their own."""

    # Only on the due date (or every day when no date is set)
    EXACT = "exact"
    # Also on every day while the due date is today or later
    UPCOMING = "upcoming"
    # Also on every day on or after the due date
    OVERDUE = "overdue"


def weekday_index(date: datetime.date) -> int:
    """Weekday with 0 = Sunday .. 6 = Saturday."""
    return date.isoweekday() % 7


def effective_recurring_type(item: Schedulable) -> RecurringType:
    recurring_type = item.get("recurring_type")
    if recurring_type:
        return recurring_type
    if item.get("recurring"):
        return "daily"
    return "none"


def _valid_weekday(value: object) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value not in ALL_WEEKDAYS:
        return None
    return value


def occupied_weekdays(item: Schedulable) -> set[int]:
    """
    The weekdays an item occupies on the repeating weekly grid.

    One-time items occupy none. Weekly/custom items with missing or invalid
    weekday data occupy none rather than failing.
    """
    recurring_type = effective_recurring_type(item)

    if recurring_type == "daily":
        return set(ALL_WEEKDAYS)
    if recurring_type == "weekly":
        weekday = _valid_weekday(item.get("recurring_weekday"))
        return {weekday} if weekday is not None else set()
    if recurring_type == "custom":
        days = item.get("recurring_days") or []
        return {day for day in map(_valid_weekday, days) if day is not None}
    return set()


def is_due_on(item: Schedulable, date: datetime.date) -> bool:
    """Whether the item's recurrence rule selects the given calendar date."""
    recurring_type = effective_recurring_type(item)

    if recurring_type == "none":
        item_date = item.get("date")
        if not item_date:
            return True
        return item_date == date_to_key(date)

    return weekday_index(date) in occupied_weekdays(item)


def is_shown_on(
    item: Schedulable,
    date: datetime.date,
    today: datetime.date,
    policy: OneTimePolicy = OneTimePolicy.UPCOMING,
) -> bool:
    """
    Display filter for list views.

    Recurring items are shown exactly when due. One-time items with a date
    follow `policy` for the days around their due date.
    """
    if is_due_on(item, date):
        return True
    if effective_recurring_type(item) != "none" or policy == OneTimePolicy.EXACT:
        return False

    item_date = date_from_key_optional(item.get("date"))
    if item_date is None:
        return False

    if policy == OneTimePolicy.UPCOMING:
        return item_date >= today
    return item_date <= date


def describe_recurrence(item: Schedulable) -> Optional[str]:
    """Short badge text for an item's recurrence, None for one-time items."""
    recurring_type = effective_recurring_type(item)

    if recurring_type == "daily":
        return "Daily"
    if recurring_type == "weekly":
        weekday = _valid_weekday(item.get("recurring_weekday"))
        return WEEKDAY_NAMES[weekday] if weekday is not None else "Weekly"
    if recurring_type == "custom":
        days = sorted(occupied_weekdays(item))
        return "".join(WEEKDAY_LETTERS[day] for day in days) or "Custom"
    return None


def normalize_recurrence(item: Schedulable) -> None:
    """Clear weekday fields that do not belong to the item's recurrence type."""
    recurring_type = item.get("recurring_type")
    if recurring_type != "weekly":
        item["recurring_weekday"] = None
    if recurring_type != "custom":
        item["recurring_days"] = None
    elif item.get("recurring_days") is not None:
        item["recurring_days"] = sorted(set(item["recurring_days"] or []))
