# SPDX-License-Identifier: MIT

from habitgrid.model.entity_type import EntityType
from habitgrid.model.habit import Habit


def get_habit_template() -> Habit:
    return {
        "id": "",
        "entity_type": EntityType.HABIT,
        "name": "",
        "time": None,
        "duration": None,
        "recurring_type": "daily",
        "recurring_weekday": None,
        "recurring_days": None,
        "tracking_type": "boolean",
        "unit": None,
        "target": None,
        "min": None,
        "max": None,
    }
