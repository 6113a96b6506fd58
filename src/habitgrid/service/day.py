# SPDX-License-Identifier: MIT

import datetime
from typing import TypedDict

from habitgrid.model.activity import Activity
from habitgrid.model.catalog import Catalog
from habitgrid.model.category import PlannedCategory, RoutineCategory
from habitgrid.model.habit import Habit
from habitgrid.service.recurrence import OneTimePolicy, is_due_on, is_shown_on


class RoutineGroup(TypedDict):
    category: RoutineCategory
    habits: list[Habit]


class PlannedEntry(TypedDict):
    category: PlannedCategory
    activity: Activity
    due: bool


def routine_groups(catalog: Catalog, date: datetime.date) -> list[RoutineGroup]:
    """Routine categories with the habits due on `date`; empty groups are dropped."""
    groups: list[RoutineGroup] = []
    for routine_category in catalog["routine_categories"]:
        habits = [habit for habit in routine_category["habits"] if is_due_on(habit, date)]
        if habits:
            groups.append({"category": routine_category, "habits": habits})
    return groups


def planned_entries(
    catalog: Catalog,
    date: datetime.date,
    today: datetime.date,
    policy: OneTimePolicy = OneTimePolicy.UPCOMING,
) -> list[PlannedEntry]:
    """
    Activities shown on `date`, those due that day first.

    Catalog order is kept within the due and not due groups.
    """
    entries: list[PlannedEntry] = []
    for planned_category in catalog["planned_categories"]:
        for activity in planned_category["activities"]:
            if not is_shown_on(activity, date, today, policy):
                continue
            entries.append(
                {
                    "category": planned_category,
                    "activity": activity,
                    "due": is_due_on(activity, date),
                }
            )
    return sorted(entries, key=lambda entry: not entry["due"])
