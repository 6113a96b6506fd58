"""Tests for the YAML backed configuration, catalog and day record repositories."""

# pylint: disable=protected-access

import datetime
from pathlib import Path

import pytest
from yaml import safe_dump, safe_load

from builders import make_activity, make_habit
from habitgrid import configuration
from habitgrid.repository.catalog import CATALOG_REPO, CatalogItemNotFoundError
from habitgrid.repository.configuration import CONFIGURATION_REPO
from habitgrid.repository.day_record import DAY_RECORD_REPO, clamp_habit_value


class TestInitialize:
    def test_creates_files_with_seed_catalog(self, initialized: Path) -> None:
        assert configuration.APP_CONFIG_PATH.is_file()
        assert safe_load(configuration.DATA_DAYS_PATH.read_text()) == {"days": {}}

        catalog = CATALOG_REPO.get_catalog()
        assert [c["id"] for c in catalog["routine_categories"]][:2] == [
            "spiritual_morning",
            "spiritual_study",
        ]
        assert [c["id"] for c in catalog["planned_categories"]] == [
            "learning",
            "career",
            "finance",
        ]

    def test_seed_catalog_is_plain_yaml(self, initialized: Path) -> None:
        raw = safe_load(configuration.DATA_CATALOG_PATH.read_text())
        assert raw["routine_categories"][0]["type"] == "spiritual"
        assert raw["routine_categories"][0]["habits"][0]["recurring_type"] == "daily"


class TestConfigurationRepository:
    def test_missing_keys_back_filled(self, habitgrid_home: Path) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
        configuration.APP_CONFIG_PATH.write_text(safe_dump({"show_header": False}))

        config = CONFIGURATION_REPO.get_config()
        assert config["show_header"] is False
        assert config["rolling_window_days"] == 14
        assert config["one_time_policy"] == "upcoming"

        assert CONFIGURATION_REPO.flush()
        saved = safe_load(configuration.APP_CONFIG_PATH.read_text())
        assert saved["streak_threshold"] == 0.7

    def test_update_unknown_key(self, initialized: Path) -> None:
        with pytest.raises(KeyError):
            CONFIGURATION_REPO.update_config(colour="red")

    def test_update_and_flush(self, initialized: Path) -> None:
        CONFIGURATION_REPO.update_config(week_starts_on="monday")
        CONFIGURATION_REPO.flush()
        saved = safe_load(configuration.APP_CONFIG_PATH.read_text())
        assert saved["week_starts_on"] == "monday"


class TestCatalogRepository:
    def test_category_crud(self, initialized: Path) -> None:
        routine_id = CATALOG_REPO.save_new_routine_category("Evening", "health", "8 PM")
        planned_id = CATALOG_REPO.save_new_planned_category("Family", "family")

        assert CATALOG_REPO.is_routine_category(routine_id)
        assert not CATALOG_REPO.is_routine_category(planned_id)

        CATALOG_REPO.modify_category(routine_id, "Night", None, None, True)
        routine = CATALOG_REPO.get_routine_category(routine_id)
        assert routine["name"] == "Night"
        assert routine["time"] is None

        CATALOG_REPO.delete_category(planned_id)
        with pytest.raises(CatalogItemNotFoundError):
            CATALOG_REPO.get_planned_category(planned_id)

    def test_habit_crud(self, initialized: Path) -> None:
        habit = make_habit("", recurring_type="weekly", recurring_weekday=4, recurring_days=[1])
        id = CATALOG_REPO.save_new_habit("health_morning", habit)

        saved = CATALOG_REPO.get_habit("health_morning", id)
        assert id.startswith("habit_")
        assert saved["recurring_days"] is None

        CATALOG_REPO.modify_habit(
            "health_morning", id, name="Stretch", recurring_type="custom", recurring_days=[3, 1]
        )
        category, modified = CATALOG_REPO.find_habit(id)
        assert category["id"] == "health_morning"
        assert modified["name"] == "Stretch"
        assert modified["recurring_weekday"] is None
        assert modified["recurring_days"] == [1, 3]

        CATALOG_REPO.delete_habit("health_morning", id)
        assert not CATALOG_REPO.has_item_id("routine", id)

    def test_activity_recurring_flag_follows_type(self, initialized: Path) -> None:
        id = CATALOG_REPO.save_new_activity("career", make_activity("", recurring_type="daily"))
        assert CATALOG_REPO.get_activity("career", id)["recurring"] is True

        CATALOG_REPO.modify_activity("career", id, recurring_type="none", date="2024-02-01")
        activity = CATALOG_REPO.get_activity("career", id)
        assert activity["recurring"] is False
        assert activity["date"] == "2024-02-01"

    def test_unknown_ids(self, initialized: Path) -> None:
        with pytest.raises(CatalogItemNotFoundError):
            CATALOG_REPO.save_new_habit("nope", make_habit(""))
        with pytest.raises(CatalogItemNotFoundError):
            CATALOG_REPO.find_activity("nope")
        with pytest.raises(LookupError):
            CATALOG_REPO.delete_category("nope")

    def test_returned_copies_do_not_leak(self, initialized: Path) -> None:
        catalog = CATALOG_REPO.get_catalog()
        catalog["routine_categories"].clear()
        assert CATALOG_REPO.get_catalog()["routine_categories"]

    def test_flush_writes_last_updated(self, initialized: Path) -> None:
        CATALOG_REPO.save_new_planned_category("Social", "social")
        assert CATALOG_REPO.flush()
        raw = safe_load(configuration.DATA_CATALOG_PATH.read_text())
        assert raw["last_updated"] is not None
        assert raw["planned_categories"][-1]["name"] == "Social"

    def test_older_files_are_completed_on_load(self, initialized: Path) -> None:
        configuration.DATA_CATALOG_PATH.write_text(
            safe_dump({"routine_categories": [{"id": "r", "name": "R", "type": "other"}]})
        )
        CATALOG_REPO._catalog = None
        catalog = CATALOG_REPO.get_catalog()
        assert catalog["planned_categories"] == []
        assert catalog["routine_categories"][0]["habits"] == []

    def test_catalog_file_that_is_not_a_mapping(self, initialized: Path) -> None:
        configuration.DATA_CATALOG_PATH.write_text(safe_dump(["not", "a", "catalog"]))
        CATALOG_REPO._catalog = None
        catalog = CATALOG_REPO.get_catalog()
        assert catalog["routine_categories"] == []
        assert catalog["planned_categories"] == []


class TestDayRecordRepository:
    def test_records_created_lazily(self, initialized: Path) -> None:
        assert DAY_RECORD_REPO.get("2024-01-01") is None
        assert DAY_RECORD_REPO.toggle_habit("2024-01-01", "water") is True
        assert DAY_RECORD_REPO.toggle_habit("2024-01-01", "water") is False
        record = DAY_RECORD_REPO.get("2024-01-01")
        assert record is not None
        assert record["routine"] == {"water": False}

    def test_numeric_values_clamped(self, initialized: Path) -> None:
        habit = make_habit("steps", tracking_type="number", min=0, max=10)
        assert DAY_RECORD_REPO.set_habit_value("2024-01-01", habit, 12) == 10
        assert DAY_RECORD_REPO.step_habit_value("2024-01-01", habit, -3) == 7
        assert DAY_RECORD_REPO.step_habit_value("2024-01-01", habit, -20) == 0

    def test_clamp_defaults(self) -> None:
        habit = make_habit("pages", tracking_type="number")
        assert clamp_habit_value(habit, 150) == 100
        assert clamp_habit_value(habit, -1) == 0
        assert clamp_habit_value(habit, 2.0) == 2
        assert clamp_habit_value(habit, 2.5) == 2.5

    def test_reflection_and_activity(self, initialized: Path) -> None:
        DAY_RECORD_REPO.set_reflection("2024-01-01", went_well="early start")
        DAY_RECORD_REPO.toggle_activity("2024-01-01", "read")
        record = DAY_RECORD_REPO.get("2024-01-01")
        assert record is not None
        assert record["reflection"]["went_well"] == "early start"
        assert record["reflection"]["improve"] == ""
        assert record["planned"] == {"read": True}

    def test_round_trip_through_file(self, initialized: Path) -> None:
        DAY_RECORD_REPO.toggle_habit("2024-01-01", "water")
        assert DAY_RECORD_REPO.flush()
        DAY_RECORD_REPO._days = None
        assert DAY_RECORD_REPO.get("2024-01-01")["routine"] == {"water": True}

    def test_unquoted_date_keys_and_malformed_records(self, initialized: Path) -> None:
        configuration.DATA_DAYS_PATH.write_text(
            "days:\n"
            "  2024-01-01:\n"
            "    routine: {water: true}\n"
            "  2024-01-02: nonsense\n"
            "  2024-01-03:\n"
            "    routine: [water]\n"
        )
        DAY_RECORD_REPO._days = None
        assert DAY_RECORD_REPO.get("2024-01-01")["routine"] == {"water": True}
        assert DAY_RECORD_REPO.get("2024-01-02") is None
        assert DAY_RECORD_REPO.get("2024-01-03") is None
        assert list(DAY_RECORD_REPO.get_all()) == ["2024-01-01"]

    def test_unknown_fields_survive_writes(self, initialized: Path) -> None:
        configuration.DATA_DAYS_PATH.write_text(
            safe_dump({"days": {"2024-01-01": {"routine": {}, "mood": "good"}}})
        )
        DAY_RECORD_REPO._days = None
        DAY_RECORD_REPO.toggle_habit("2024-01-01", "water")
        DAY_RECORD_REPO.flush()
        raw = safe_load(configuration.DATA_DAYS_PATH.read_text())
        assert raw["days"]["2024-01-01"]["mood"] == "good"

    def test_delete_item_marks_scoped_by_section(self, initialized: Path) -> None:
        DAY_RECORD_REPO.toggle_habit("2024-01-01", "shared")
        DAY_RECORD_REPO.toggle_activity("2024-01-01", "shared")
        DAY_RECORD_REPO.delete_item_marks("routine", "shared")
        record = DAY_RECORD_REPO.get("2024-01-01")
        assert record["routine"] == {}
        assert record["planned"] == {"shared": True}

    def test_keys_are_local_calendar_dates(self) -> None:
        from habitgrid.time import date_to_key

        assert date_to_key(datetime.date(2024, 3, 5)) == "2024-03-05"
