# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, TypedDict

import pendulum

from habitgrid.model.activity import Activity
from habitgrid.model.catalog import Catalog
from habitgrid.model.day_record import DayRecord, DayRecordLookup
from habitgrid.model.habit import Habit
from habitgrid.service.calendar import week_start_for
from habitgrid.service.recurrence import effective_recurring_type, is_due_on
from habitgrid.service.timespec import round_half_up
from habitgrid.time import as_pendulum_date, date_range_back, date_to_key

DEFAULT_WINDOW_DAYS = 14
DEFAULT_STREAK_THRESHOLD = 0.7
MAX_STREAK_DAYS = 365
RANKING_LIMIT = 5
STRUGGLING_BELOW = 50
STRONG_FROM = 80


class DayRate(TypedDict):
    date: pendulum.Date
    date_key: str
    done: int
    total: int
    percentage: int
    has_data: bool


class ItemStat(TypedDict):
    id: str
    name: str
    category: str
    category_type: str
    recurring_type: str
    completed: int
    tracked: int
    rate: int


class Rankings(TypedDict):
    struggling: list[ItemStat]
    strong: list[ItemStat]


class CategoryStat(TypedDict):
    id: str
    name: str
    type: str
    total_completed: int
    total_possible: int
    rate: int


class MonthlySummary(TypedDict):
    days: list[DayRate]
    average: int
    perfect_days: int
    active_days: int


class WeeklySummary(TypedDict):
    label: str
    start: pendulum.Date
    days: list[DayRate]
    average: int


class DaySummary(TypedDict):
    routine_done: int
    routine_total: int
    percentage: int
    planned_done: int
    planned_total: int
    streak: int


def percent(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        return 0
    return round_half_up(numerator / denominator * 100)


def _routine_marks(record: Optional[DayRecord]) -> dict[str, Any]:
    if record is None:
        return {}
    marks = record.get("routine")
    return marks if isinstance(marks, dict) else {}


def _planned_marks(record: Optional[DayRecord]) -> dict[str, Any]:
    if record is None:
        return {}
    marks = record.get("planned")
    return marks if isinstance(marks, dict) else {}


def all_habits(catalog: Catalog) -> list[Habit]:
    return [
        habit
        for routine_category in catalog["routine_categories"]
        for habit in routine_category["habits"]
    ]


def all_activities(catalog: Catalog) -> list[Activity]:
    return [
        activity
        for planned_category in catalog["planned_categories"]
        for activity in planned_category["activities"]
    ]


def is_habit_completed(habit: Habit, record: Optional[DayRecord]) -> bool:
    """
    Numeric habits are complete once their value reaches the target
    (1 when no target is set); yes/no habits when their mark is truthy.
    """
    value = _routine_marks(record).get(habit["id"])
    if habit.get("tracking_type") == "number":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return value >= (habit.get("target") or 1)
    return bool(value)


def is_activity_completed(activity: Activity, record: Optional[DayRecord]) -> bool:
    return bool(_planned_marks(record).get(activity["id"]))


def day_rate(
    habits: list[Habit], record: Optional[DayRecord], date: datetime.date
) -> DayRate:
    """Completion of every habit on `date`, as a rounded percentage."""
    done = sum(1 for habit in habits if is_habit_completed(habit, record))
    return {
        "date": as_pendulum_date(date),
        "date_key": date_to_key(date),
        "done": done,
        "total": len(habits),
        "percentage": percent(done, len(habits)),
        "has_data": record is not None,
    }


def daily_series(
    habits: list[Habit],
    store: DayRecordLookup,
    dates: list[pendulum.Date],
) -> list[DayRate]:
    return [day_rate(habits, store.get(date_to_key(date)), date) for date in dates]


def calculate_streak(
    habits: list[Habit],
    store: DayRecordLookup,
    today: datetime.date,
    threshold_ratio: float = DEFAULT_STREAK_THRESHOLD,
    max_days: int = MAX_STREAK_DAYS,
) -> int:
    """
    Count consecutive days before `today` on which at least
    `max(1, threshold_ratio * len(habits))` habits were completed.

    Today is not counted. The streak stops at the first day without a
    record or below the threshold, and is capped at `max_days`.
    """
    threshold = max(1.0, threshold_ratio * len(habits))
    streak = 0
    check_date = as_pendulum_date(today).subtract(days=1)

    while streak < max_days:
        record = store.get(date_to_key(check_date))
        if record is None:
            break
        done = sum(1 for habit in habits if is_habit_completed(habit, record))
        if done < threshold:
            break
        streak += 1
        check_date = check_date.subtract(days=1)

    return streak


def habit_performance(
    catalog: Catalog,
    store: DayRecordLookup,
    today: datetime.date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> list[ItemStat]:
    """
    Per habit completion over the trailing window ending today.

    Every day that has a record is tracked, whatever the habit's recurrence.
    """
    dates = date_range_back(today, window_days)
    records = {date_to_key(date): store.get(date_to_key(date)) for date in dates}

    stats: list[ItemStat] = []
    for routine_category in catalog["routine_categories"]:
        for habit in routine_category["habits"]:
            completed = 0
            tracked = 0
            for date in dates:
                record = records[date_to_key(date)]
                if record is None:
                    continue
                tracked += 1
                if is_habit_completed(habit, record):
                    completed += 1
            stats.append(
                {
                    "id": habit["id"],
                    "name": habit["name"],
                    "category": routine_category["name"],
                    "category_type": routine_category["type"],
                    "recurring_type": effective_recurring_type(habit),
                    "completed": completed,
                    "tracked": tracked,
                    "rate": percent(completed, tracked),
                }
            )
    return stats


def activity_performance(
    catalog: Catalog,
    store: DayRecordLookup,
    today: datetime.date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> list[ItemStat]:
    """Per recurring activity completion over the trailing window ending today."""
    dates = date_range_back(today, window_days)
    records = {date_to_key(date): store.get(date_to_key(date)) for date in dates}

    stats: list[ItemStat] = []
    for planned_category in catalog["planned_categories"]:
        for activity in planned_category["activities"]:
            recurring_type = effective_recurring_type(activity)
            if recurring_type == "none":
                continue
            completed = 0
            tracked = 0
            for date in dates:
                record = records[date_to_key(date)]
                if record is None or not is_due_on(activity, date):
                    continue
                tracked += 1
                if is_activity_completed(activity, record):
                    completed += 1
            stats.append(
                {
                    "id": activity["id"],
                    "name": activity["name"],
                    "category": planned_category["name"],
                    "category_type": planned_category["type"],
                    "recurring_type": recurring_type,
                    "completed": completed,
                    "tracked": tracked,
                    "rate": percent(completed, tracked),
                }
            )
    return stats


def rank_items(stats: list[ItemStat], limit: int = RANKING_LIMIT) -> Rankings:
    """
    Struggling: rate below 50, lowest first. Strong: rate 80 or more,
    highest first. Items never tracked are left out of both.
    """
    ranked = sorted(
        (stat for stat in stats if stat["tracked"] > 0), key=lambda stat: stat["rate"]
    )
    struggling = [stat for stat in ranked if stat["rate"] < STRUGGLING_BELOW]
    strong = [stat for stat in ranked if stat["rate"] >= STRONG_FROM]
    return {
        "struggling": struggling[:limit],
        "strong": list(reversed(strong[-limit:])) if limit > 0 else [],
    }


def category_performance(
    catalog: Catalog,
    store: DayRecordLookup,
    today: datetime.date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> list[CategoryStat]:
    dates = date_range_back(today, window_days)

    stats: list[CategoryStat] = []
    for routine_category in catalog["routine_categories"]:
        total_completed = 0
        total_possible = 0
        for date in dates:
            record = store.get(date_to_key(date))
            if record is None:
                continue
            for habit in routine_category["habits"]:
                total_possible += 1
                if is_habit_completed(habit, record):
                    total_completed += 1
        stats.append(
            {
                "id": routine_category["id"],
                "name": routine_category["name"],
                "type": routine_category["type"],
                "total_completed": total_completed,
                "total_possible": total_possible,
                "rate": percent(total_completed, total_possible),
            }
        )
    return sorted(stats, key=lambda stat: stat["rate"])


def _average_percentage(days: list[DayRate]) -> int:
    if not days:
        return 0
    return round_half_up(sum(day["percentage"] for day in days) / len(days))


def monthly_summary(
    habits: list[Habit],
    store: DayRecordLookup,
    today: datetime.date,
    days: int = 30,
) -> MonthlySummary:
    series = daily_series(habits, store, date_range_back(today, days))
    with_data = [day for day in series if day["has_data"]]
    return {
        "days": series,
        "average": _average_percentage(with_data),
        "perfect_days": sum(1 for day in with_data if day["percentage"] == 100),
        "active_days": len(with_data),
    }


def weekly_summaries(
    habits: list[Habit],
    store: DayRecordLookup,
    today: datetime.date,
    weeks: int = 4,
) -> list[WeeklySummary]:
    """Monday based weeks, oldest first, the current week last."""
    summaries: list[WeeklySummary] = []
    current_week_start = week_start_for(today, first_weekday=1)

    for week in range(weeks - 1, -1, -1):
        start = current_week_start.subtract(weeks=week)
        series = daily_series(
            habits, store, [start.add(days=offset) for offset in range(7)]
        )
        valid = [day for day in series if day["percentage"] > 0 or day["has_data"]]
        summaries.append(
            {
                "label": start.format("MMM D"),
                "start": start,
                "days": series,
                "average": _average_percentage(valid),
            }
        )
    return summaries


def day_summary(
    catalog: Catalog,
    store: DayRecordLookup,
    date: datetime.date,
    threshold_ratio: float = DEFAULT_STREAK_THRESHOLD,
) -> DaySummary:
    habits = all_habits(catalog)
    record = store.get(date_to_key(date))
    rate = day_rate(habits, record, date)
    due_activities = [
        activity for activity in all_activities(catalog) if is_due_on(activity, date)
    ]
    return {
        "routine_done": rate["done"],
        "routine_total": rate["total"],
        "percentage": rate["percentage"],
        "planned_done": sum(
            1
            for activity in due_activities
            if is_activity_completed(activity, record)
        ),
        "planned_total": len(due_activities),
        "streak": calculate_streak(habits, store, date, threshold_ratio),
    }
