# SPDX-License-Identifier: MIT

"""
Conversion between the catalog/day-record model and the camelCase JSON blob
written by the browser version of the tracker (local storage / gist file).
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from habitgrid.model.activity import Activity
from habitgrid.model.catalog import CATALOG_VERSION, Catalog
from habitgrid.model.category import PlannedCategory, RoutineCategory
from habitgrid.model.category_type import CategoryType
from habitgrid.model.day_record import DayRecord
from habitgrid.model.habit import Habit
from habitgrid.service.recurrence import normalize_recurrence
from habitgrid.template.activity import get_activity_template
from habitgrid.template.catalog import get_empty_catalog_template
from habitgrid.template.category import (
    get_planned_category_template,
    get_routine_category_template,
)
from habitgrid.template.day_record import get_day_record_template
from habitgrid.template.habit import get_habit_template
from habitgrid.time import date_from_key_optional

logger = logging.getLogger(__name__)

CATEGORY_TYPES = {category_type.value for category_type in CategoryType}
RECURRING_TYPES = {"none", "daily", "weekly", "custom"}


class LegacyFormatError(ValueError):
    """Raised when a file is not a readable app-data blob."""

    pass


def _category_type(value: Any) -> str:
    if value in CATEGORY_TYPES:
        return str(value)
    return CategoryType.OTHER.value


def _recurring_type(value: Any) -> Optional[str]:
    return value if value in RECURRING_TYPES else None


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _weekday(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        return None
    return value


def _weekdays(value: Any) -> Optional[list[int]]:
    if not isinstance(value, list):
        return None
    return [day for day in (_weekday(item) for item in value) if day is not None]


def _objects(value: Any, what: str) -> list[dict[str, Any]]:
    """Keep the mappings in a list, warning about anything else."""
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Skipping %s in imported data: not a list", what)
        return []
    objects = []
    for item in value:
        if isinstance(item, dict):
            objects.append(item)
        else:
            logger.warning("Skipping unreadable %s entry %r in imported data", what, item)
    return objects


def _habit_from_legacy(raw: dict[str, Any]) -> Habit:
    habit = get_habit_template()
    habit["id"] = str(raw.get("id", ""))
    habit["name"] = str(raw.get("name", ""))
    habit["time"] = _text(raw.get("time"))
    habit["duration"] = _text(raw.get("duration"))
    habit["tracking_type"] = (
        "number" if raw.get("trackingType") == "number" else "boolean"
    )
    habit["unit"] = _text(raw.get("unit"))
    habit["target"] = _number(raw.get("target"))
    habit["min"] = _number(raw.get("min"))
    habit["max"] = _number(raw.get("max"))
    # Habits written before recurrence existed ran every day
    habit["recurring_type"] = _recurring_type(raw.get("recurringType")) or "daily"  # type: ignore[typeddict-item]
    habit["recurring_weekday"] = _weekday(raw.get("recurringWeekday"))
    habit["recurring_days"] = _weekdays(raw.get("recurringDays"))
    normalize_recurrence(habit)
    return habit


def _activity_from_legacy(raw: dict[str, Any]) -> Activity:
    activity = get_activity_template()
    activity["id"] = str(raw.get("id", ""))
    activity["name"] = str(raw.get("name", ""))
    activity["time"] = _text(raw.get("time"))
    activity["duration"] = _text(raw.get("duration"))
    activity["date"] = _text(raw.get("date"))
    activity["priority"] = (
        raw["priority"] if raw.get("priority") in ("high", "medium", "low") else "medium"
    )
    activity["description"] = _text(raw.get("description"))
    activity["recurring"] = bool(raw.get("recurring", False))
    # Left unset when absent so the legacy flag keeps deciding
    activity["recurring_type"] = _recurring_type(raw.get("recurringType"))  # type: ignore[typeddict-item]
    activity["recurring_weekday"] = _weekday(raw.get("recurringWeekday"))
    activity["recurring_days"] = _weekdays(raw.get("recurringDays"))
    if activity["recurring_type"] is not None:
        normalize_recurrence(activity)
    return activity


def _day_from_legacy(raw: dict[str, Any]) -> DayRecord:
    record = get_day_record_template()
    routine = raw.get("routine")
    planned = raw.get("planned")
    reflection = raw.get("reflection")
    if isinstance(routine, dict):
        record["routine"].update(routine)
    if isinstance(planned, dict):
        record["planned"].update({key: bool(value) for key, value in planned.items()})
    if isinstance(reflection, dict):
        record["reflection"]["went_well"] = str(reflection.get("wentWell") or "")
        record["reflection"]["improve"] = str(reflection.get("improve") or "")
        record["reflection"]["gratitude"] = str(reflection.get("gratitude") or "")
    return record


def import_app_data(raw: dict[str, Any]) -> tuple[Catalog, dict[str, DayRecord]]:
    """Convert an app-data blob into a catalog and day records."""
    catalog = get_empty_catalog_template()
    catalog["last_updated"] = _text(raw.get("lastUpdated"))

    for raw_category in _objects(raw.get("routineCategories"), "routine category"):
        routine_category: RoutineCategory = get_routine_category_template()
        routine_category["id"] = str(raw_category.get("id", ""))
        routine_category["name"] = str(raw_category.get("name", ""))
        routine_category["type"] = _category_type(raw_category.get("type"))
        routine_category["time"] = _text(raw_category.get("time"))
        routine_category["habits"] = [
            _habit_from_legacy(raw_habit)
            for raw_habit in _objects(raw_category.get("habits"), "habit")
        ]
        catalog["routine_categories"].append(routine_category)

    for raw_category in _objects(raw.get("plannedCategories"), "planned category"):
        planned_category: PlannedCategory = get_planned_category_template()
        planned_category["id"] = str(raw_category.get("id", ""))
        planned_category["name"] = str(raw_category.get("name", ""))
        planned_category["type"] = _category_type(raw_category.get("type"))
        planned_category["activities"] = [
            _activity_from_legacy(raw_activity)
            for raw_activity in _objects(raw_category.get("activities"), "activity")
        ]
        catalog["planned_categories"].append(planned_category)

    raw_days = raw.get("days") or {}
    if not isinstance(raw_days, dict):
        logger.warning("Skipping days in imported data: not an object")
        raw_days = {}

    days: dict[str, DayRecord] = {}
    for date_key, raw_day in raw_days.items():
        if date_from_key_optional(date_key) is None or not isinstance(raw_day, dict):
            logger.warning("Skipping unreadable day %r in imported data", date_key)
            continue
        days[date_key] = _day_from_legacy(raw_day)

    return catalog, days


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def export_app_data(catalog: Catalog, days: dict[str, DayRecord]) -> dict[str, Any]:
    """Convert a catalog and day records into an app-data blob."""
    return {
        "version": CATALOG_VERSION,
        "routineCategories": [
            _drop_none(
                {
                    "id": routine_category["id"],
                    "name": routine_category["name"],
                    "time": routine_category.get("time"),
                    "type": routine_category["type"],
                    "habits": [
                        _drop_none(
                            {
                                "id": habit["id"],
                                "name": habit["name"],
                                "time": habit.get("time"),
                                "duration": habit.get("duration"),
                                "trackingType": habit.get("tracking_type"),
                                "unit": habit.get("unit"),
                                "target": habit.get("target"),
                                "min": habit.get("min"),
                                "max": habit.get("max"),
                                "recurringType": habit.get("recurring_type"),
                                "recurringWeekday": habit.get("recurring_weekday"),
                                "recurringDays": habit.get("recurring_days"),
                            }
                        )
                        for habit in routine_category["habits"]
                    ],
                }
            )
            for routine_category in catalog["routine_categories"]
        ],
        "plannedCategories": [
            {
                "id": planned_category["id"],
                "name": planned_category["name"],
                "type": planned_category["type"],
                "activities": [
                    _drop_none(
                        {
                            "id": activity["id"],
                            "name": activity["name"],
                            "time": activity.get("time"),
                            "duration": activity.get("duration"),
                            "date": activity.get("date"),
                            "priority": activity.get("priority"),
                            "description": activity.get("description"),
                            "recurring": bool(activity.get("recurring")),
                            "recurringType": activity.get("recurring_type"),
                            "recurringWeekday": activity.get("recurring_weekday"),
                            "recurringDays": activity.get("recurring_days"),
                        }
                    )
                    for activity in planned_category["activities"]
                ],
            }
            for planned_category in catalog["planned_categories"]
        ],
        "days": {
            date_key: {
                "routine": dict(record["routine"]),
                "planned": dict(record["planned"]),
                "reflection": {
                    "wentWell": record["reflection"]["went_well"],
                    "improve": record["reflection"]["improve"],
                    "gratitude": record["reflection"]["gratitude"],
                },
            }
            for date_key, record in days.items()
        },
        "lastUpdated": catalog.get("last_updated"),
    }


def read_app_data_file(path: Path) -> dict[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LegacyFormatError(f"{path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise LegacyFormatError(f"{path} is not UTF-8 text: {e}") from e
    if not isinstance(raw, dict):
        raise LegacyFormatError(f"{path} does not contain an app-data object")
    return raw


def write_app_data_file(path: Path, app_data: dict[str, Any]) -> None:
    path.write_text(json.dumps(app_data, indent=2, ensure_ascii=False), encoding="utf-8")
