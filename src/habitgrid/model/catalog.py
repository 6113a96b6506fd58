# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from habitgrid.model.category import PlannedCategory, RoutineCategory

CATALOG_VERSION = "2.0.0"


class Catalog(TypedDict):
    version: str
    routine_categories: list[RoutineCategory]
    planned_categories: list[PlannedCategory]
    last_updated: Optional[str]
