"""Tests for selecting and ordering the items shown on a day's checklist."""

import pendulum

from builders import (
    make_activity,
    make_catalog,
    make_habit,
    make_planned_category,
    make_routine_category,
)
from habitgrid.service.day import planned_entries, routine_groups
from habitgrid.service.recurrence import OneTimePolicy

MONDAY = pendulum.date(2024, 1, 1)


def catalog():
    return make_catalog(
        routine=[
            make_routine_category(
                "weekly",
                [make_habit("review", recurring_type="weekly", recurring_weekday=2)],
            ),
            make_routine_category(
                "daily",
                [
                    make_habit("water"),
                    make_habit("gym", recurring_type="custom", recurring_days=[1, 3]),
                ],
            ),
        ],
        planned=[
            make_planned_category(
                "learning",
                [
                    make_activity("later", date="2024-01-05"),
                    make_activity("read", recurring_type="daily"),
                    make_activity("anytime"),
                ],
            ),
            make_planned_category(
                "career",
                [make_activity("pitch", date="2024-01-01")],
            ),
        ],
    )


class TestRoutineGroups:
    def test_only_due_habits_and_non_empty_groups(self) -> None:
        groups = routine_groups(catalog(), MONDAY)
        assert [group["category"]["id"] for group in groups] == ["daily"]
        assert [habit["id"] for habit in groups[0]["habits"]] == ["water", "gym"]


class TestPlannedEntries:
    def test_due_items_first_in_catalog_order(self) -> None:
        entries = planned_entries(catalog(), MONDAY, MONDAY, OneTimePolicy.UPCOMING)
        assert [entry["activity"]["id"] for entry in entries] == [
            "read",
            "anytime",
            "pitch",
            "later",
        ]
        assert [entry["due"] for entry in entries] == [True, True, True, False]

    def test_exact_policy_hides_other_days(self) -> None:
        entries = planned_entries(catalog(), MONDAY, MONDAY, OneTimePolicy.EXACT)
        assert "later" not in [entry["activity"]["id"] for entry in entries]

    def test_entries_carry_their_category(self) -> None:
        entries = planned_entries(catalog(), MONDAY, MONDAY)
        pitch = next(entry for entry in entries if entry["activity"]["id"] == "pitch")
        assert pitch["category"]["id"] == "career"
