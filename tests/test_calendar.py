"""Tests for building the repeating weekly calendar grid from the catalog."""

import pendulum

from builders import (
    make_activity,
    make_catalog,
    make_habit,
    make_planned_category,
    make_routine_category,
)
from habitgrid.service.calendar import WorkSchedule, build_week, week_start_for

SUNDAY = pendulum.date(2024, 1, 7)
MONDAY = pendulum.date(2024, 1, 8)
WORK: WorkSchedule = {"start": "9:00 AM", "end": "6:15 PM", "days": [1, 2, 3, 4, 5]}


def sample_catalog():
    return make_catalog(
        routine=[
            make_routine_category(
                "morning",
                [
                    make_habit("kriya", time="5:00 AM", duration="30 min"),
                    make_habit("water", time="All day"),
                    make_habit(
                        "review",
                        time="7:00 AM",
                        duration="1 hour",
                        recurring_type="weekly",
                        recurring_weekday=1,
                    ),
                ],
                category_type="spiritual",
            )
        ],
        planned=[
            make_planned_category(
                "learning",
                [
                    make_activity(
                        "reading",
                        time="5:15 AM",
                        duration="15 min",
                        recurring_type="daily",
                    ),
                    make_activity("call", time="8:00 PM", date="2024-01-09"),
                ],
            )
        ],
    )


class TestWeekStart:
    def test_sunday_start(self) -> None:
        assert week_start_for(pendulum.date(2024, 1, 10)) == SUNDAY
        assert week_start_for(SUNDAY) == SUNDAY

    def test_monday_start(self) -> None:
        assert week_start_for(pendulum.date(2024, 1, 10), first_weekday=1) == MONDAY
        assert week_start_for(SUNDAY, first_weekday=1) == pendulum.date(2024, 1, 1)


class TestBuildWeek:
    def test_seven_consecutive_days(self) -> None:
        days = build_week(sample_catalog(), SUNDAY)
        assert [day["date"] for day in days] == [SUNDAY.add(days=i) for i in range(7)]
        assert [day["weekday"] for day in days] == list(range(7))

    def test_daily_items_placed_with_columns(self) -> None:
        sunday = build_week(sample_catalog(), SUNDAY)[0]
        events = {event["id"]: event for event in sunday["events"]}

        assert set(events) == {"kriya", "reading"}
        assert events["kriya"]["start_slot"] == 4
        assert events["kriya"]["duration_slots"] == 2
        assert events["kriya"]["category_type"] == "spiritual"
        assert events["reading"]["start_slot"] == 5
        assert events["kriya"]["column"] != events["reading"]["column"]
        assert events["kriya"]["total_columns"] == 2

    def test_unanchored_items_listed_as_all_day(self) -> None:
        sunday = build_week(sample_catalog(), SUNDAY)[0]
        assert [item["id"] for item in sunday["all_day"]] == ["water"]

    def test_weekly_item_only_on_its_weekday(self) -> None:
        days = build_week(sample_catalog(), SUNDAY)
        with_review = [
            day["weekday"]
            for day in days
            if any(event["id"] == "review" for event in day["events"])
        ]
        assert with_review == [1]

    def test_one_time_items_never_on_grid(self) -> None:
        days = build_week(sample_catalog(), SUNDAY)
        assert not any(
            event["id"] == "call" for day in days for event in day["events"]
        )

    def test_work_block_on_work_days(self) -> None:
        days = build_week(sample_catalog(), SUNDAY, WORK)
        work_days = [
            day["weekday"]
            for day in days
            if any(event["id"] == "work" for event in day["events"])
        ]
        assert work_days == [1, 2, 3, 4, 5]

        work = next(event for event in days[1]["events"] if event["id"] == "work")
        assert work["start_slot"] == 20
        assert work["duration_slots"] == 37
        assert work["category_type"] == "work"

    def test_unparseable_work_bounds_are_skipped(self) -> None:
        broken: WorkSchedule = {"start": "after lunch", "end": "late", "days": [1]}
        monday = build_week(sample_catalog(), SUNDAY, broken)[1]
        assert not any(event["id"] == "work" for event in monday["events"])

    def test_same_item_id_in_two_categories(self) -> None:
        catalog = make_catalog(
            routine=[
                make_routine_category("a", [make_habit("walk", time="6:00 AM")]),
                make_routine_category("b", [make_habit("walk", time="6:00 AM")]),
            ]
        )
        sunday = build_week(catalog, SUNDAY)[0]
        assert sorted(event["column"] for event in sunday["events"]) == [0, 1]
