# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional, Union, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from habitgrid import configuration, time
from habitgrid.model.activity import Activity, Priority
from habitgrid.model.catalog import CATALOG_VERSION, Catalog
from habitgrid.model.category import PlannedCategory, RoutineCategory
from habitgrid.model.entity_id import EntityId, generate_entity_id
from habitgrid.model.habit import Habit, TrackingType
from habitgrid.model.schedulable import RecurringType, Schedulable
from habitgrid.service.recurrence import normalize_recurrence
from habitgrid.template.catalog import get_empty_catalog_template
from habitgrid.template.category import (
    get_planned_category_template,
    get_routine_category_template,
)

logger = logging.getLogger(__name__)


class CatalogItemNotFoundError(LookupError):
    """Raised when a category, habit or activity id does not exist."""

    pass


class CatalogRepository:
    def __init__(self) -> None:
        self._catalog: Optional[Catalog] = None
        self.is_dirty = False

    @property
    def catalog(self) -> Catalog:
        if self._catalog is None:
            self.__load_data()
        if self._catalog is None:
            raise ValueError()
        return self._catalog

    def __load_data(self) -> None:
        raw_catalog = load(configuration.DATA_CATALOG_PATH.read_text(), Loader=Loader)
        if raw_catalog is None:
            logger.warning(
                "Catalog file %s is empty, starting from an empty catalog",
                configuration.DATA_CATALOG_PATH,
            )
            raw_catalog = {}
        elif not isinstance(raw_catalog, dict):
            logger.warning(
                "Catalog file %s does not hold a mapping, starting from an empty catalog",
                configuration.DATA_CATALOG_PATH,
            )
            raw_catalog = {}

        # Fields are only ever added, so older files are completed in place
        for key, default in get_empty_catalog_template().items():
            raw_catalog.setdefault(key, default)
        for routine_category in raw_catalog["routine_categories"]:
            routine_category.setdefault("habits", [])
        for planned_category in raw_catalog["planned_categories"]:
            planned_category.setdefault("activities", [])

        self._catalog = cast(Catalog, raw_catalog)

    def __save_data(self) -> None:
        configuration.DATA_CATALOG_PATH.write_text(
            dump(dict(self.catalog), Dumper=Dumper, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._catalog is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __touch(self) -> None:
        self.is_dirty = True
        self.catalog["version"] = CATALOG_VERSION
        self.catalog["last_updated"] = time.now_iso_str()

    def get_catalog(self) -> Catalog:
        return deepcopy(self.catalog)

    def replace_catalog(self, catalog: Catalog) -> None:
        self._catalog = deepcopy(catalog)
        self.__touch()

    # ─────────────────────────────────────────────────────────────
    # Categories
    # ─────────────────────────────────────────────────────────────

    def __routine_category(self, id: EntityId) -> RoutineCategory:
        for routine_category in self.catalog["routine_categories"]:
            if routine_category["id"] == id:
                return routine_category
        raise CatalogItemNotFoundError(f"No routine category with id '{id}'")

    def __planned_category(self, id: EntityId) -> PlannedCategory:
        for planned_category in self.catalog["planned_categories"]:
            if planned_category["id"] == id:
                return planned_category
        raise CatalogItemNotFoundError(f"No planned category with id '{id}'")

    def get_routine_category(self, id: EntityId) -> RoutineCategory:
        return deepcopy(self.__routine_category(id))

    def get_planned_category(self, id: EntityId) -> PlannedCategory:
        return deepcopy(self.__planned_category(id))

    def is_routine_category(self, id: EntityId) -> bool:
        return any(
            routine_category["id"] == id
            for routine_category in self.catalog["routine_categories"]
        )

    def save_new_routine_category(
        self, name: str, category_type: str, time: Optional[str]
    ) -> EntityId:
        category = get_routine_category_template()
        category["id"] = generate_entity_id("routine")
        category["name"] = name
        category["type"] = category_type
        category["time"] = time

        self.catalog["routine_categories"].append(category)
        self.__touch()
        return category["id"]

    def save_new_planned_category(self, name: str, category_type: str) -> EntityId:
        category = get_planned_category_template()
        category["id"] = generate_entity_id("planned")
        category["name"] = name
        category["type"] = category_type

        self.catalog["planned_categories"].append(category)
        self.__touch()
        return category["id"]

    def modify_category(
        self,
        id: EntityId,
        name: Optional[str],
        category_type: Optional[str],
        time: Optional[str],
        remove_time: bool,
    ) -> None:
        category: Union[RoutineCategory, PlannedCategory]
        if self.is_routine_category(id):
            category = self.__routine_category(id)
            if time is not None:
                category["time"] = time
            if remove_time:
                category["time"] = None
        else:
            category = self.__planned_category(id)

        if name is not None:
            category["name"] = name
        if category_type is not None:
            category["type"] = category_type
        self.__touch()

    def delete_category(self, id: EntityId) -> None:
        if self.is_routine_category(id):
            self.catalog["routine_categories"].remove(self.__routine_category(id))
        else:
            self.catalog["planned_categories"].remove(self.__planned_category(id))
        self.__touch()

    # ─────────────────────────────────────────────────────────────
    # Habits
    # ─────────────────────────────────────────────────────────────

    def __habit(self, category_id: EntityId, id: EntityId) -> Habit:
        for habit in self.__routine_category(category_id)["habits"]:
            if habit["id"] == id:
                return habit
        raise CatalogItemNotFoundError(
            f"No habit with id '{id}' in category '{category_id}'"
        )

    def get_habit(self, category_id: EntityId, id: EntityId) -> Habit:
        return deepcopy(self.__habit(category_id, id))

    def find_habit(self, id: EntityId) -> tuple[RoutineCategory, Habit]:
        """First habit with the given id in any routine category."""
        for routine_category in self.catalog["routine_categories"]:
            for habit in routine_category["habits"]:
                if habit["id"] == id:
                    return deepcopy(routine_category), deepcopy(habit)
        raise CatalogItemNotFoundError(f"No habit with id '{id}'")

    def save_new_habit(self, category_id: EntityId, habit: Habit) -> EntityId:
        category = self.__routine_category(category_id)

        habit["id"] = generate_entity_id("habit")
        normalize_recurrence(habit)

        category["habits"].append(habit)
        self.__touch()
        return habit["id"]

    def modify_habit(
        self,
        category_id: EntityId,
        id: EntityId,
        name: Optional[str] = None,
        time: Optional[str] = None,
        duration: Optional[str] = None,
        tracking_type: Optional[TrackingType] = None,
        unit: Optional[str] = None,
        target: Optional[float] = None,
        min: Optional[float] = None,
        max: Optional[float] = None,
        recurring_type: Optional[RecurringType] = None,
        recurring_weekday: Optional[int] = None,
        recurring_days: Optional[list[int]] = None,
        remove_time: bool = False,
        remove_duration: bool = False,
        remove_unit: bool = False,
        remove_target: bool = False,
        remove_min: bool = False,
        remove_max: bool = False,
    ) -> None:
        habit = self.__habit(category_id, id)

        if name is not None:
            habit["name"] = name
        if time is not None:
            habit["time"] = time
        if duration is not None:
            habit["duration"] = duration
        if tracking_type is not None:
            habit["tracking_type"] = tracking_type
        if unit is not None:
            habit["unit"] = unit
        if target is not None:
            habit["target"] = target
        if min is not None:
            habit["min"] = min
        if max is not None:
            habit["max"] = max
        self.__modify_recurrence(
            habit, recurring_type, recurring_weekday, recurring_days
        )

        if remove_time:
            habit["time"] = None
        if remove_duration:
            habit["duration"] = None
        if remove_unit:
            habit["unit"] = None
        if remove_target:
            habit["target"] = None
        if remove_min:
            habit["min"] = None
        if remove_max:
            habit["max"] = None

        self.__touch()

    def delete_habit(self, category_id: EntityId, id: EntityId) -> None:
        category = self.__routine_category(category_id)
        category["habits"].remove(self.__habit(category_id, id))
        self.__touch()

    # ─────────────────────────────────────────────────────────────
    # Activities
    # ─────────────────────────────────────────────────────────────

    def __activity(self, category_id: EntityId, id: EntityId) -> Activity:
        for activity in self.__planned_category(category_id)["activities"]:
            if activity["id"] == id:
                return activity
        raise CatalogItemNotFoundError(
            f"No activity with id '{id}' in category '{category_id}'"
        )

    def get_activity(self, category_id: EntityId, id: EntityId) -> Activity:
        return deepcopy(self.__activity(category_id, id))

    def find_activity(self, id: EntityId) -> tuple[PlannedCategory, Activity]:
        """First activity with the given id in any planned category."""
        for planned_category in self.catalog["planned_categories"]:
            for activity in planned_category["activities"]:
                if activity["id"] == id:
                    return deepcopy(planned_category), deepcopy(activity)
        raise CatalogItemNotFoundError(f"No activity with id '{id}'")

    def save_new_activity(self, category_id: EntityId, activity: Activity) -> EntityId:
        category = self.__planned_category(category_id)

        activity["id"] = generate_entity_id("activity")
        normalize_recurrence(activity)
        activity["recurring"] = activity.get("recurring_type") not in (None, "none")

        category["activities"].append(activity)
        self.__touch()
        return activity["id"]

    def modify_activity(
        self,
        category_id: EntityId,
        id: EntityId,
        name: Optional[str] = None,
        time: Optional[str] = None,
        duration: Optional[str] = None,
        date: Optional[str] = None,
        priority: Optional[Priority] = None,
        description: Optional[str] = None,
        recurring_type: Optional[RecurringType] = None,
        recurring_weekday: Optional[int] = None,
        recurring_days: Optional[list[int]] = None,
        remove_time: bool = False,
        remove_duration: bool = False,
        remove_date: bool = False,
        remove_description: bool = False,
    ) -> None:
        activity = self.__activity(category_id, id)

        if name is not None:
            activity["name"] = name
        if time is not None:
            activity["time"] = time
        if duration is not None:
            activity["duration"] = duration
        if date is not None:
            activity["date"] = date
        if priority is not None:
            activity["priority"] = priority
        if description is not None:
            activity["description"] = description
        if recurring_type is not None:
            activity["recurring"] = recurring_type != "none"
        self.__modify_recurrence(
            activity, recurring_type, recurring_weekday, recurring_days
        )

        if remove_time:
            activity["time"] = None
        if remove_duration:
            activity["duration"] = None
        if remove_date:
            activity["date"] = None
        if remove_description:
            activity["description"] = None

        self.__touch()

    def delete_activity(self, category_id: EntityId, id: EntityId) -> None:
        category = self.__planned_category(category_id)
        category["activities"].remove(self.__activity(category_id, id))
        self.__touch()

    def __modify_recurrence(
        self,
        item: Schedulable,
        recurring_type: Optional[RecurringType],
        recurring_weekday: Optional[int],
        recurring_days: Optional[list[int]],
    ) -> None:
        if recurring_type is not None:
            item["recurring_type"] = recurring_type
        if recurring_weekday is not None:
            item["recurring_weekday"] = recurring_weekday
        if recurring_days is not None:
            item["recurring_days"] = recurring_days
        normalize_recurrence(item)

    def has_item_id(self, section: str, id: EntityId) -> bool:
        """Whether any habit ("routine") or activity ("planned") still uses the id."""
        if section == "routine":
            return any(
                habit["id"] == id
                for routine_category in self.catalog["routine_categories"]
                for habit in routine_category["habits"]
            )
        return any(
            activity["id"] == id
            for planned_category in self.catalog["planned_categories"]
            for activity in planned_category["activities"]
        )


CATALOG_REPO = CatalogRepository()
