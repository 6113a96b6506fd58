# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.table import Table

from habitgrid.model.day_record import DayRecord
from habitgrid.service.day import PlannedEntry, RoutineGroup
from habitgrid.service.progress import (
    DaySummary,
    is_activity_completed,
    is_habit_completed,
)
from habitgrid.time import date_to_display_str
from habitgrid.view.views.header import header
from habitgrid.view.views.util import (
    colored,
    format_optional,
    format_recurrence,
    progress_bar,
)


def _check(done: bool) -> str:
    return "[green]X[/green]" if done else " "


def day_view(
    report_name: str,
    date: datetime.date,
    groups: list[RoutineGroup],
    entries: list[PlannedEntry],
    record: Optional[DayRecord],
    summary: DaySummary,
) -> None:
    """
    Display the routine checklist, planned activities and reflection for a day.

    Args:
        report_name: The name of the report
        date: The day shown
        groups: Routine categories with their habits due that day
        entries: Planned activities shown that day, due ones first
        record: The day's record, None when nothing was recorded
        summary: Completion counts and streak for the header line
    """
    header(report_name, date_to_display_str(date))

    console = Console()
    console.print(
        Padding(
            f"{progress_bar(summary['percentage'])} "
            f"{summary['percentage']}%  "
            f"routine {summary['routine_done']}/{summary['routine_total']}  "
            f"planned {summary['planned_done']}/{summary['planned_total']}  "
            f"streak {summary['streak']}",
            (1, 1),
        )
    )

    routine_table = Table(box=box.SIMPLE, title="routine", title_justify="left")
    routine_table.add_column("")
    routine_table.add_column("category")
    routine_table.add_column("id")
    routine_table.add_column("habit")
    routine_table.add_column("time")
    routine_table.add_column("value", justify="right")

    routine_marks = record["routine"] if record is not None else {}
    for group in groups:
        category = group["category"]
        for habit in group["habits"]:
            value = ""
            if habit.get("tracking_type") == "number":
                current = routine_marks.get(habit["id"])
                value = f"{format_optional(current) or '0'}"
                if habit.get("target") is not None:
                    value += f"/{format_optional(habit['target'])}"
                if habit.get("unit"):
                    value += f" {habit['unit']}"
            routine_table.add_row(
                _check(is_habit_completed(habit, record)),
                colored(category["name"], category["type"]),
                habit["id"],
                habit["name"],
                habit.get("time") or "",
                value,
            )
    console.print(routine_table)

    planned_table = Table(box=box.SIMPLE, title="planned", title_justify="left")
    planned_table.add_column("")
    planned_table.add_column("category")
    planned_table.add_column("id")
    planned_table.add_column("activity")
    planned_table.add_column("time")
    planned_table.add_column("repeats")
    planned_table.add_column("priority")

    for entry in entries:
        category = entry["category"]
        activity = entry["activity"]
        name = activity["name"] if entry["due"] else f"[dim]{activity['name']}[/dim]"
        planned_table.add_row(
            _check(is_activity_completed(activity, record)),
            colored(category["name"], category["type"]),
            activity["id"],
            name,
            activity.get("time") or "",
            format_recurrence(activity),
            activity.get("priority", "medium"),
        )
    console.print(planned_table)

    if record is not None:
        reflection = record["reflection"]
        if any(reflection.values()):
            reflection_table = Table(
                box=box.SIMPLE, title="reflection", title_justify="left"
            )
            reflection_table.add_column("prompt")
            reflection_table.add_column("note")
            reflection_table.add_row("went well", reflection["went_well"])
            reflection_table.add_row("improve", reflection["improve"])
            reflection_table.add_row("gratitude", reflection["gratitude"])
            console.print(reflection_table)
