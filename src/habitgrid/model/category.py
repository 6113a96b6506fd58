# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from habitgrid.model.activity import Activity
from habitgrid.model.habit import Habit


class RoutineCategory(TypedDict):
    id: str
    entity_type: str  # "routine"
    name: str
    type: str  # CategoryType value
    time: Optional[str]  # e.g. "5:00 - 6:30 AM"
    habits: list[Habit]


class PlannedCategory(TypedDict):
    id: str
    entity_type: str  # "planned"
    name: str
    type: str  # CategoryType value
    activities: list[Activity]
