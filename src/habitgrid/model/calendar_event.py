# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from habitgrid.model.schedulable import Schedulable


class CalendarEvent(TypedDict):
    id: str
    name: str
    category_type: str
    start_slot: int
    duration_slots: int
    column: int
    total_columns: int


class CalendarDay(TypedDict):
    date: pendulum.Date
    weekday: int  # 0 = Sunday
    events: list[CalendarEvent]
    all_day: list[Schedulable]  # unanchored items, not placed on the grid
