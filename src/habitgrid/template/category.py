# SPDX-License-Identifier: MIT

from habitgrid.model.category import PlannedCategory, RoutineCategory
from habitgrid.model.category_type import CategoryType
from habitgrid.model.entity_type import EntityType


def get_routine_category_template() -> RoutineCategory:
    return {
        "id": "",
        "entity_type": EntityType.ROUTINE_CATEGORY,
        "name": "",
        "type": CategoryType.OTHER.value,
        "time": None,
        "habits": [],
    }


def get_planned_category_template() -> PlannedCategory:
    return {
        "id": "",
        "entity_type": EntityType.PLANNED_CATEGORY,
        "name": "",
        "type": CategoryType.OTHER.value,
        "activities": [],
    }
