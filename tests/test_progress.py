"""Tests for completion rates, streaks and rankings over day records."""

import pendulum

from builders import (
    MemoryStore,
    make_activity,
    make_catalog,
    make_habit,
    make_planned_category,
    make_record,
    make_routine_category,
)
from habitgrid.service.progress import (
    ItemStat,
    activity_performance,
    all_habits,
    calculate_streak,
    category_performance,
    day_rate,
    day_summary,
    habit_performance,
    is_habit_completed,
    monthly_summary,
    percent,
    rank_items,
    weekly_summaries,
)
from habitgrid.time import date_to_key

TODAY = pendulum.date(2024, 1, 10)  # Wednesday


def key(days_ago: int) -> str:
    return date_to_key(TODAY.subtract(days=days_ago))


def four_habits():
    return [
        make_habit("a"),
        make_habit("b"),
        make_habit("c"),
        make_habit("steps", tracking_type="number", target=10, unit="k"),
    ]


class TestCompletion:
    def test_numeric_habit_needs_target(self) -> None:
        habit = make_habit("steps", tracking_type="number", target=10)
        assert not is_habit_completed(habit, make_record({"steps": 5}))
        assert is_habit_completed(habit, make_record({"steps": 10}))

    def test_numeric_habit_default_target_is_one(self) -> None:
        habit = make_habit("pages", tracking_type="number")
        assert not is_habit_completed(habit, make_record({"pages": 0}))
        assert is_habit_completed(habit, make_record({"pages": 1}))

    def test_numeric_habit_ignores_boolean_marks(self) -> None:
        habit = make_habit("steps", tracking_type="number", target=1)
        assert not is_habit_completed(habit, make_record({"steps": True}))

    def test_boolean_habit_truthy(self) -> None:
        habit = make_habit("a")
        assert is_habit_completed(habit, make_record({"a": True}))
        assert not is_habit_completed(habit, make_record({"a": False}))
        assert not is_habit_completed(habit, None)


class TestDayRate:
    def test_three_of_four(self) -> None:
        record = make_record({"a": True, "b": True, "c": True, "steps": 5})
        rate = day_rate(four_habits(), record, TODAY)
        assert rate["done"] == 3
        assert rate["total"] == 4
        assert rate["percentage"] == 75
        assert rate["has_data"]

    def test_no_habits_is_zero(self) -> None:
        assert day_rate([], make_record(), TODAY)["percentage"] == 0

    def test_habit_not_due_still_counts_in_total(self) -> None:
        habits = four_habits()[:3] + [
            make_habit("monday", recurring_type="weekly", recurring_weekday=1),
        ]
        rate = day_rate(habits, make_record({"a": True, "b": True, "c": True}), TODAY)
        assert (rate["done"], rate["total"], rate["percentage"]) == (3, 4, 75)

    def test_rounds_half_up(self) -> None:
        assert percent(1, 8) == 13
        assert percent(5, 8) == 63
        assert percent(1, 0) == 0


class TestStreak:
    def test_stops_at_missing_record(self) -> None:
        store = MemoryStore({key(1): make_record({"a": True, "b": True, "c": True})})
        assert calculate_streak(four_habits(), store, TODAY) == 1

    def test_below_threshold_breaks(self) -> None:
        store = MemoryStore(
            {
                key(1): make_record({"a": True, "b": True, "c": True}),
                key(2): make_record({"a": True, "b": True}),
                key(3): make_record({"a": True, "b": True, "c": True}),
            }
        )
        assert calculate_streak(four_habits(), store, TODAY) == 1

    def test_today_not_counted(self) -> None:
        store = MemoryStore({key(0): make_record({"a": True, "b": True, "c": True})})
        assert calculate_streak(four_habits(), store, TODAY) == 0

    def test_threshold_at_least_one_habit(self) -> None:
        habits = [make_habit("a")]
        store = MemoryStore({key(1): make_record({"a": False})})
        assert calculate_streak(habits, store, TODAY) == 0

    def test_capped(self) -> None:
        habits = [make_habit("a")]
        store = MemoryStore(
            {key(days_ago): make_record({"a": True}) for days_ago in range(1, 20)}
        )
        assert calculate_streak(habits, store, TODAY, max_days=10) == 10

    def test_custom_threshold(self) -> None:
        store = MemoryStore({key(1): make_record({"a": True, "b": True})})
        assert calculate_streak(four_habits(), store, TODAY, threshold_ratio=0.5) == 1
        assert calculate_streak(four_habits(), store, TODAY, threshold_ratio=0.7) == 0

    def test_threshold_uses_every_habit(self) -> None:
        habits = [
            make_habit("a"),
            make_habit("b"),
            make_habit("sun1", recurring_type="weekly", recurring_weekday=0),
            make_habit("sun2", recurring_type="weekly", recurring_weekday=0),
        ]
        store = MemoryStore({key(1): make_record({"a": True, "b": True})})
        assert calculate_streak(habits, store, TODAY) == 0


def stat(id: str, rate: int, tracked: int = 10) -> ItemStat:
    return {
        "id": id,
        "name": id,
        "category": "c",
        "category_type": "health",
        "recurring_type": "daily",
        "completed": rate * tracked // 100,
        "tracked": tracked,
        "rate": rate,
    }


class TestRankings:
    def test_struggling_and_strong(self) -> None:
        rankings = rank_items(
            [stat("mid", 60), stat("low", 10), stat("lower", 0), stat("top", 100), stat("good", 80)]
        )
        assert [item["id"] for item in rankings["struggling"]] == ["lower", "low"]
        assert [item["id"] for item in rankings["strong"]] == ["top", "good"]

    def test_untracked_items_left_out(self) -> None:
        rankings = rank_items([stat("new", 0, tracked=0)])
        assert rankings == {"struggling": [], "strong": []}

    def test_limited_to_five(self) -> None:
        rankings = rank_items([stat(f"s{rate}", rate) for rate in range(0, 50, 5)])
        assert [item["rate"] for item in rankings["struggling"]] == [0, 5, 10, 15, 20]


class TestItemPerformance:
    def catalog(self):
        return make_catalog(
            routine=[
                make_routine_category(
                    "health",
                    [
                        make_habit("a"),
                        make_habit("gym", recurring_type="weekly", recurring_weekday=3),
                    ],
                )
            ],
            planned=[
                make_planned_category(
                    "learning",
                    [
                        make_activity("read", recurring_type="daily"),
                        make_activity("call", date="2024-01-09"),
                    ],
                )
            ],
        )

    def test_habits_tracked_on_every_recorded_day(self) -> None:
        store = MemoryStore(
            {
                key(0): make_record({"a": True, "gym": True}),
                key(1): make_record({"a": False}),
            }
        )
        stats = {item["id"]: item for item in habit_performance(self.catalog(), store, TODAY)}
        assert (stats["a"]["completed"], stats["a"]["tracked"], stats["a"]["rate"]) == (1, 2, 50)
        assert (stats["gym"]["completed"], stats["gym"]["tracked"]) == (1, 2)

    def test_weekly_habit_tracked_on_other_weekdays(self) -> None:
        catalog = make_catalog(
            routine=[
                make_routine_category(
                    "health",
                    [make_habit("gym", recurring_type="weekly", recurring_weekday=1)],
                )
            ]
        )
        store = MemoryStore({key(0): make_record(), key(1): make_record()})
        stats = habit_performance(catalog, store, TODAY)
        assert (stats[0]["completed"], stats[0]["tracked"], stats[0]["rate"]) == (0, 2, 0)

    def test_window_excludes_older_days(self) -> None:
        store = MemoryStore({key(14): make_record({"a": True})})
        stats = habit_performance(self.catalog(), store, TODAY, window_days=14)
        assert all(item["tracked"] == 0 for item in stats)

    def test_one_time_activities_not_ranked(self) -> None:
        store = MemoryStore({key(0): make_record(planned={"read": True})})
        stats = activity_performance(self.catalog(), store, TODAY)
        assert [item["id"] for item in stats] == ["read"]
        assert stats[0]["rate"] == 100

    def test_category_performance(self) -> None:
        store = MemoryStore({key(0): make_record({"a": True})})
        stats = category_performance(self.catalog(), store, TODAY)
        assert stats[0]["total_completed"] == 1
        assert stats[0]["total_possible"] == 2
        assert stats[0]["rate"] == 50

    def test_category_performance_counts_habits_not_due(self) -> None:
        store = MemoryStore({key(1): make_record({"a": True})})
        stats = category_performance(self.catalog(), store, TODAY)
        # Tuesday is not a gym day but gym still counts as possible
        assert stats[0]["total_possible"] == 2
        assert stats[0]["rate"] == 50


class TestSummaries:
    def test_monthly_summary(self) -> None:
        habits = [make_habit("a"), make_habit("b")]
        store = MemoryStore(
            {
                key(0): make_record({"a": True, "b": True}),
                key(1): make_record({"a": True}),
            }
        )
        summary = monthly_summary(habits, store, TODAY)
        assert len(summary["days"]) == 30
        assert summary["active_days"] == 2
        assert summary["perfect_days"] == 1
        assert summary["average"] == 75

    def test_weekly_summaries_oldest_first(self) -> None:
        habits = [make_habit("a")]
        store = MemoryStore({key(0): make_record({"a": True})})
        summaries = weekly_summaries(habits, store, TODAY, weeks=2)
        assert [summary["start"] for summary in summaries] == [
            pendulum.date(2024, 1, 1),
            pendulum.date(2024, 1, 8),
        ]
        assert summaries[0]["average"] == 0
        assert summaries[1]["average"] == 100
        assert summaries[1]["label"] == "Jan 8"

    def test_day_summary(self) -> None:
        catalog = TestItemPerformance().catalog()
        store = MemoryStore(
            {
                key(0): make_record({"a": True}, {"read": True}),
                key(1): make_record({"a": True, "gym": True}),
            }
        )
        summary = day_summary(catalog, store, TODAY)
        assert summary["routine_done"] == 1
        assert summary["routine_total"] == 2
        assert summary["percentage"] == 50
        assert summary["planned_done"] == 1
        assert summary["planned_total"] == 1
        assert summary["streak"] == 1
        assert len(all_habits(catalog)) == 2
