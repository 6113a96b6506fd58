"""Builders for catalog items, day records and in-memory stores used across tests."""

from typing import Any, Optional

from habitgrid.model.activity import Activity
from habitgrid.model.catalog import Catalog
from habitgrid.model.category import PlannedCategory, RoutineCategory
from habitgrid.model.day_record import DayRecord
from habitgrid.model.habit import Habit
from habitgrid.template.activity import get_activity_template
from habitgrid.template.catalog import get_empty_catalog_template
from habitgrid.template.category import (
    get_planned_category_template,
    get_routine_category_template,
)
from habitgrid.template.day_record import get_day_record_template
from habitgrid.template.habit import get_habit_template


def make_habit(id: str, **fields: Any) -> Habit:
    habit = get_habit_template()
    habit["id"] = id
    habit["name"] = fields.pop("name", id.title())
    habit.update(fields)  # type: ignore[typeddict-item]
    return habit


def make_activity(id: str, **fields: Any) -> Activity:
    activity = get_activity_template()
    activity["id"] = id
    activity["name"] = fields.pop("name", id.title())
    activity.update(fields)  # type: ignore[typeddict-item]
    return activity


def make_routine_category(
    id: str, habits: list[Habit], category_type: str = "health"
) -> RoutineCategory:
    category = get_routine_category_template()
    category["id"] = id
    category["name"] = id.title()
    category["type"] = category_type
    category["habits"] = habits
    return category


def make_planned_category(
    id: str, activities: list[Activity], category_type: str = "learning"
) -> PlannedCategory:
    category = get_planned_category_template()
    category["id"] = id
    category["name"] = id.title()
    category["type"] = category_type
    category["activities"] = activities
    return category


def make_catalog(
    routine: Optional[list[RoutineCategory]] = None,
    planned: Optional[list[PlannedCategory]] = None,
) -> Catalog:
    catalog = get_empty_catalog_template()
    catalog["routine_categories"] = routine or []
    catalog["planned_categories"] = planned or []
    return catalog


def make_record(
    routine: Optional[dict[str, Any]] = None,
    planned: Optional[dict[str, bool]] = None,
) -> DayRecord:
    record = get_day_record_template()
    record["routine"].update(routine or {})
    record["planned"].update(planned or {})
    return record


class MemoryStore:
    """Day record lookup backed by a plain dict, keyed 'YYYY-MM-DD'."""

    def __init__(self, records: Optional[dict[str, DayRecord]] = None) -> None:
        self.records = records or {}

    def get(self, date_key: str) -> Optional[DayRecord]:
        return self.records.get(date_key)
