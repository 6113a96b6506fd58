# SPDX-License-Identifier: MIT


class EntityType:
    HABIT = "habit"
    ACTIVITY = "activity"
    ROUTINE_CATEGORY = "routine"
    PLANNED_CATEGORY = "planned"
