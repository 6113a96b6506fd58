# SPDX-License-Identifier: MIT

from typing import Optional

from habitgrid.model.activity import Activity, Priority
from habitgrid.model.catalog import CATALOG_VERSION, Catalog
from habitgrid.model.category import PlannedCategory, RoutineCategory
from habitgrid.model.category_type import CategoryType
from habitgrid.model.habit import Habit
from habitgrid.template.activity import get_activity_template
from habitgrid.template.category import (
    get_planned_category_template,
    get_routine_category_template,
)
from habitgrid.template.habit import get_habit_template


def get_empty_catalog_template() -> Catalog:
    return {
        "version": CATALOG_VERSION,
        "routine_categories": [],
        "planned_categories": [],
        "last_updated": None,
    }


def _habit(id: str, name: str, time: str, duration: Optional[str]) -> Habit:
    habit = get_habit_template()
    habit["id"] = id
    habit["name"] = name
    habit["time"] = time
    habit["duration"] = duration
    return habit


def _activity(
    id: str, name: str, time: str, duration: str, priority: Priority
) -> Activity:
    activity = get_activity_template()
    activity["id"] = id
    activity["name"] = name
    activity["time"] = time
    activity["duration"] = duration
    activity["priority"] = priority
    activity["recurring_type"] = "daily"
    activity["recurring"] = True
    return activity


def _routine(
    id: str,
    name: str,
    time: str,
    category_type: CategoryType,
    habits: list[Habit],
) -> RoutineCategory:
    category = get_routine_category_template()
    category["id"] = id
    category["name"] = name
    category["time"] = time
    category["type"] = category_type.value
    category["habits"] = habits
    return category


def _planned(
    id: str, name: str, category_type: CategoryType, activities: list[Activity]
) -> PlannedCategory:
    category = get_planned_category_template()
    category["id"] = id
    category["name"] = name
    category["type"] = category_type.value
    category["activities"] = activities
    return category


def get_default_catalog_template() -> Catalog:
    """The starter catalog written on first run."""
    catalog = get_empty_catalog_template()
    catalog["routine_categories"] = [
        _routine(
            "spiritual_morning",
            "Spiritual - Morning Sadhana",
            "5:00 - 6:30 AM",
            CategoryType.SPIRITUAL,
            [
                _habit("kriya", "Sudarshan Kriya", "5:00 AM", "30 min"),
                _habit("sanyam", "Sanyam & Padmasadhana", "5:30 AM", "30 min"),
                _habit("sandhya", "Sandhya Vandana", "6:00 AM", "15 min"),
                _habit("puja", "Nitya Puja", "6:15 AM", "15 min"),
            ],
        ),
        _routine(
            "spiritual_study",
            "Spiritual - Study & Chanting",
            "6:40 - 7:20 AM",
            CategoryType.SPIRITUAL,
            [
                _habit("scripture", "Scripture Study", "6:40 AM", "30 min"),
                _habit("veda", "Veda Chanting", "7:10 AM", "10 min"),
            ],
        ),
        _routine(
            "health_morning",
            "Health - Morning Routine",
            "4:30 - 7:30 AM",
            CategoryType.HEALTH,
            [
                _habit("bath", "Bath + Fresh up", "4:30 AM", "30 min"),
                _habit("eye", "Eye Exercise", "6:30 AM", "10 min"),
                _habit("breakfast", "Healthy Breakfast", "7:30 AM", "30 min"),
            ],
        ),
        _routine(
            "health_allday",
            "Health - All Day Habits",
            "Throughout Day",
            CategoryType.HEALTH,
            [
                _habit("water", "3L Water", "All day", None),
                _habit("healthyFood", "Healthy Food (No junk/sugar)", "All meals", None),
                _habit("steps", "2000+ Steps", "All day", None),
            ],
        ),
        _routine(
            "health_evening",
            "Health - Evening & Sleep",
            "6:30 - 9:00 PM",
            CategoryType.HEALTH,
            [
                _habit("exercise", "Physical Activity", "6:30 PM", "45 min"),
                _habit("dinner", "Healthy Dinner", "7:30 PM", "45 min"),
                _habit("sleep", "Sleep by 9 PM", "9:00 PM", "7.5 hrs"),
            ],
        ),
    ]
    catalog["planned_categories"] = [
        _planned(
            "learning",
            "Learning",
            CategoryType.LEARNING,
            [
                _activity("mlLearning", "ML/AI Learning", "AM Commute", "30 min", "high"),
                _activity("reading", "Book Reading", "8:45 PM", "20 min", "medium"),
            ],
        ),
        _planned(
            "career",
            "Career",
            CategoryType.CAREER,
            [_activity("project", "Side Project", "8:15 PM", "30 min", "high")],
        ),
        _planned(
            "finance",
            "Finance",
            CategoryType.FINANCE,
            [
                _activity("market", "Market Tracking", "7:20 AM", "10 min", "medium"),
                _activity(
                    "wisdomHatch", "Wisdom Hatch Course", "PM Commute", "20 min", "high"
                ),
            ],
        ),
    ]
    return catalog
