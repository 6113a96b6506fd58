# SPDX-License-Identifier: MIT

from typing import TypedDict


class Interval(TypedDict):
    id: str
    start_slot: int
    duration_slots: int


class PlacedInterval(Interval):
    column: int
    total_columns: int


def interval_end(interval: Interval) -> int:
    return interval["start_slot"] + max(1, interval["duration_slots"])


def intervals_overlap(a: Interval, b: Interval) -> bool:
    """Half-open overlap test on [start, start + duration)."""
    return a["start_slot"] < interval_end(b) and interval_end(a) > b["start_slot"]


def sort_intervals(intervals: list[Interval]) -> list[Interval]:
    """Start ascending, longer blocks first on equal start, then by id."""
    return sorted(
        intervals,
        key=lambda interval: (
            interval["start_slot"],
            -max(1, interval["duration_slots"]),
            interval["id"],
        ),
    )


def assign_columns(intervals: list[Interval]) -> list[PlacedInterval]:
    """
    Assign each interval of a single day a column so that overlapping
    intervals are rendered side by side.

    Greedy interval colouring: intervals are visited in `sort_intervals`
    order and take the lowest column not used by an already placed
    interval they overlap. Afterwards `total_columns` is one more than the
    highest column among the interval and everything overlapping it.

    Overlapping intervals never share a column. The column count is not
    minimal, and because overlap is not transitive an interval may report
    more columns than are ever in use at one instant. Both are accepted.

    Returns the placed intervals in sorted order; the input is not mutated.
    """
    placed: list[PlacedInterval] = []

    for interval in sort_intervals(intervals):
        occupied_columns = {
            other["column"] for other in placed if intervals_overlap(other, interval)
        }
        column = 0
        while column in occupied_columns:
            column += 1

        placed.append(
            {
                "id": interval["id"],
                "start_slot": interval["start_slot"],
                "duration_slots": max(1, interval["duration_slots"]),
                "column": column,
                "total_columns": 1,
            }
        )

    for interval in placed:
        highest_column = max(
            other["column"] for other in placed if intervals_overlap(other, interval)
        )
        interval["total_columns"] = highest_column + 1

    return placed
