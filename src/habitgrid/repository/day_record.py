# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from typing import Any, Optional, Union, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from habitgrid import configuration
from habitgrid.model.day_record import DayRecord
from habitgrid.model.habit import Habit
from habitgrid.template.day_record import get_day_record_template
from habitgrid.time import date_to_key

logger = logging.getLogger(__name__)

DEFAULT_NUMERIC_MIN = 0
DEFAULT_NUMERIC_MAX = 100


def clamp_habit_value(habit: Habit, value: float) -> Union[int, float]:
    """Keep a numeric habit's value within its min/max (0..100 when unset)."""
    lower = habit.get("min")
    upper = habit.get("max")
    lower = DEFAULT_NUMERIC_MIN if lower is None else lower
    upper = DEFAULT_NUMERIC_MAX if upper is None else upper
    clamped = min(upper, max(lower, value))
    if isinstance(clamped, float) and clamped.is_integer():
        return int(clamped)
    return clamped


class DayRecordRepository:
    """Day records keyed by local calendar date ('YYYY-MM-DD')."""

    def __init__(self) -> None:
        self._days: Optional[dict[str, Any]] = None
        self.is_dirty = False

    @property
    def days(self) -> dict[str, Any]:
        if self._days is None:
            self.__load_data()
        if self._days is None:
            raise ValueError()
        return self._days

    def __load_data(self) -> None:
        raw = load(configuration.DATA_DAYS_PATH.read_text(), Loader=Loader)
        raw_days = raw.get("days") if isinstance(raw, dict) else None
        if not isinstance(raw_days, dict):
            raw_days = {}

        self._days = {}
        for key, record in raw_days.items():
            # Hand-edited files may carry unquoted keys that YAML reads as dates
            if isinstance(key, datetime.date):
                key = date_to_key(key)
            self._days[str(key)] = record

    def __save_data(self) -> None:
        configuration.DATA_DAYS_PATH.write_text(
            dump({"days": self.days}, Dumper=Dumper)
        )

    def flush(self) -> bool:
        if self._days is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_record_for_read(
        self, date_key: str, raw_record: Any
    ) -> Optional[DayRecord]:
        if not isinstance(raw_record, dict):
            logger.warning("Ignoring malformed day record for %s", date_key)
            return None
        for section in ("routine", "planned"):
            if section in raw_record and not isinstance(raw_record[section], dict):
                logger.warning(
                    "Ignoring day record for %s: '%s' is not a mapping",
                    date_key,
                    section,
                )
                return None

        record = get_day_record_template()
        record["routine"].update(raw_record.get("routine") or {})
        record["planned"].update(raw_record.get("planned") or {})
        reflection = raw_record.get("reflection")
        if isinstance(reflection, dict):
            for field in ("went_well", "improve", "gratitude"):
                if reflection.get(field) is not None:
                    record["reflection"][field] = str(reflection[field])  # type: ignore[literal-required]
        return deepcopy(record)

    def __record_for_write(self, date_key: str) -> DayRecord:
        existing = self.days.get(date_key)
        record = (
            self.__convert_record_for_read(date_key, existing)
            if existing is not None
            else None
        )
        if record is None:
            record = get_day_record_template()
        else:
            # Keep fields this version does not know about
            record = cast(DayRecord, {**existing, **record})
        self.days[date_key] = record
        self.is_dirty = True
        return cast(DayRecord, self.days[date_key])

    def get(self, date_key: str) -> Optional[DayRecord]:
        """The record for a date, or None when nothing was recorded (or it is unreadable)."""
        raw_record = self.days.get(date_key)
        if raw_record is None:
            return None
        return self.__convert_record_for_read(date_key, raw_record)

    def get_all(self) -> dict[str, DayRecord]:
        records: dict[str, DayRecord] = {}
        for date_key in sorted(self.days):
            record = self.get(date_key)
            if record is not None:
                records[date_key] = record
        return records

    def replace_all(self, days: dict[str, DayRecord]) -> None:
        self._days = deepcopy(dict(days))
        self.is_dirty = True

    def toggle_habit(self, date_key: str, habit_id: str) -> bool:
        record = self.__record_for_write(date_key)
        value = not bool(record["routine"].get(habit_id))
        record["routine"][habit_id] = value
        return value

    def set_habit_value(
        self, date_key: str, habit: Habit, value: float
    ) -> Union[int, float]:
        record = self.__record_for_write(date_key)
        clamped = clamp_habit_value(habit, value)
        record["routine"][habit["id"]] = clamped
        return clamped

    def step_habit_value(
        self, date_key: str, habit: Habit, delta: float
    ) -> Union[int, float]:
        current = self.__record_for_write(date_key)["routine"].get(habit["id"])
        if isinstance(current, bool) or not isinstance(current, (int, float)):
            current = 0
        return self.set_habit_value(date_key, habit, current + delta)

    def toggle_activity(self, date_key: str, activity_id: str) -> bool:
        record = self.__record_for_write(date_key)
        value = not bool(record["planned"].get(activity_id))
        record["planned"][activity_id] = value
        return value

    def set_reflection(
        self,
        date_key: str,
        went_well: Optional[str] = None,
        improve: Optional[str] = None,
        gratitude: Optional[str] = None,
    ) -> None:
        record = self.__record_for_write(date_key)
        if went_well is not None:
            record["reflection"]["went_well"] = went_well
        if improve is not None:
            record["reflection"]["improve"] = improve
        if gratitude is not None:
            record["reflection"]["gratitude"] = gratitude

    def delete_item_marks(self, section: str, item_id: str) -> None:
        """Remove every "routine" or "planned" mark referencing a deleted item."""
        for raw_record in self.days.values():
            if not isinstance(raw_record, dict):
                continue
            marks = raw_record.get(section)
            if isinstance(marks, dict) and item_id in marks:
                del marks[item_id]
                self.is_dirty = True


DAY_RECORD_REPO = DayRecordRepository()
