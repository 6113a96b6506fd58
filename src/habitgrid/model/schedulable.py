# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, Optional, TypedDict

RecurringType = Literal["none", "daily", "weekly", "custom"]


class Schedulable(TypedDict):
    """Fields shared by habits and activities that drive calendar placement."""

    id: str
    entity_type: str
    name: str
    time: Optional[str]  # free-form, e.g. "6:00 AM", "Morning", "All day"
    duration: Optional[str]  # free-form, e.g. "45 min", "1.5 hours"
    recurring_type: Optional[RecurringType]
    recurring_weekday: Optional[int]  # 0 = Sunday .. 6 = Saturday, weekly only
    recurring_days: Optional[list[int]]  # custom only
    # Legacy fields, only ever present on activities
    recurring: NotRequired[bool]
    date: NotRequired[Optional[str]]
