# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional, TypedDict

import pendulum

from habitgrid.model.calendar_event import CalendarDay, CalendarEvent
from habitgrid.model.catalog import Catalog
from habitgrid.model.category_type import WORK_CATEGORY_TYPE
from habitgrid.model.schedulable import Schedulable
from habitgrid.service.layout import Interval, assign_columns
from habitgrid.service.recurrence import occupied_weekdays, weekday_index
from habitgrid.service.timespec import parse_duration_slots, parse_start_slot
from habitgrid.time import as_pendulum_date

logger = logging.getLogger(__name__)

WORK_EVENT_ID = "work"
WORK_EVENT_NAME = "Work"


class WorkSchedule(TypedDict):
    start: str  # time label, e.g. "9:00 AM"
    end: str  # time label, e.g. "6:15 PM"
    days: list[int]  # 0 = Sunday


class ScheduledItem(TypedDict):
    item: Schedulable
    category_type: str


def collect_scheduled_items(catalog: Catalog) -> list[ScheduledItem]:
    """All habits and activities in catalog order, tagged with their category type."""
    scheduled: list[ScheduledItem] = []
    for routine_category in catalog["routine_categories"]:
        for habit in routine_category["habits"]:
            scheduled.append({"item": habit, "category_type": routine_category["type"]})
    for planned_category in catalog["planned_categories"]:
        for activity in planned_category["activities"]:
            scheduled.append(
                {"item": activity, "category_type": planned_category["type"]}
            )
    return scheduled


def week_start_for(date: datetime.date, first_weekday: int = 0) -> pendulum.Date:
    """First day of the week containing `date` (first_weekday: 0 = Sunday, 1 = Monday)."""
    pendulum_date = as_pendulum_date(date)
    offset = (weekday_index(pendulum_date) - first_weekday) % 7
    return pendulum_date.subtract(days=offset)


def _work_interval(
    work_schedule: WorkSchedule, weekday: int
) -> Optional[tuple[int, int]]:
    if weekday not in work_schedule["days"]:
        return None
    start_slot = parse_start_slot(work_schedule["start"])
    end_slot = parse_start_slot(work_schedule["end"])
    if start_slot is None or end_slot is None:
        logger.warning(
            "Ignoring work block with unparseable bounds %r - %r",
            work_schedule["start"],
            work_schedule["end"],
        )
        return None
    return start_slot, max(1, end_slot - start_slot)


def build_day(
    scheduled_items: list[ScheduledItem],
    date: datetime.date,
    work_schedule: Optional[WorkSchedule] = None,
) -> CalendarDay:
    """
    Lay out the recurring items that fall on `date`'s weekday.

    Items with an anchored time become CalendarEvents with a column
    assignment; unanchored ones ("All day", unparseable) go to `all_day`.
    One-time items never appear on the repeating grid.
    """
    pendulum_date = as_pendulum_date(date)
    weekday = weekday_index(pendulum_date)

    intervals: list[Interval] = []
    names: dict[str, tuple[str, str, str]] = {}
    all_day: list[Schedulable] = []

    if work_schedule is not None:
        work = _work_interval(work_schedule, weekday)
        if work is not None:
            key = "work"
            intervals.append(
                {"id": key, "start_slot": work[0], "duration_slots": work[1]}
            )
            names[key] = (WORK_EVENT_ID, WORK_EVENT_NAME, WORK_CATEGORY_TYPE)

    for index, scheduled in enumerate(scheduled_items):
        item = scheduled["item"]
        if weekday not in occupied_weekdays(item):
            continue

        start_slot = parse_start_slot(item.get("time"))
        if start_slot is None:
            all_day.append(item)
            continue

        # Item ids are only unique within their category, key by position instead
        key = f"{index:05d}"
        intervals.append(
            {
                "id": key,
                "start_slot": start_slot,
                "duration_slots": parse_duration_slots(item.get("duration")),
            }
        )
        names[key] = (item["id"], item["name"], scheduled["category_type"])

    events: list[CalendarEvent] = []
    for placed in assign_columns(intervals):
        item_id, name, category_type = names[placed["id"]]
        events.append(
            {
                "id": item_id,
                "name": name,
                "category_type": category_type,
                "start_slot": placed["start_slot"],
                "duration_slots": placed["duration_slots"],
                "column": placed["column"],
                "total_columns": placed["total_columns"],
            }
        )

    return {
        "date": pendulum_date,
        "weekday": weekday,
        "events": events,
        "all_day": all_day,
    }


def build_week(
    catalog: Catalog,
    week_start: datetime.date,
    work_schedule: Optional[WorkSchedule] = None,
) -> list[CalendarDay]:
    """Seven CalendarDays starting at `week_start`."""
    scheduled_items = collect_scheduled_items(catalog)
    start = as_pendulum_date(week_start)
    return [
        build_day(scheduled_items, start.add(days=offset), work_schedule)
        for offset in range(7)
    ]
