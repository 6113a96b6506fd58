# SPDX-License-Identifier: MIT

from habitgrid.model.activity import Activity
from habitgrid.model.entity_type import EntityType


def get_activity_template() -> Activity:
    return {
        "id": "",
        "entity_type": EntityType.ACTIVITY,
        "name": "",
        "time": None,
        "duration": None,
        "recurring_type": "none",
        "recurring_weekday": None,
        "recurring_days": None,
        "recurring": False,
        "date": None,
        "priority": "medium",
        "description": None,
    }
