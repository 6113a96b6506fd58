# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from habitgrid.model.activity import Activity
from habitgrid.model.catalog import Catalog
from habitgrid.model.category import PlannedCategory, RoutineCategory
from habitgrid.model.habit import Habit
from habitgrid.view.views.header import header
from habitgrid.view.views.util import colored, format_optional, format_recurrence


def categories_view(report_name: str, catalog: Catalog) -> None:
    """Display every routine and planned category in a table."""
    header(report_name)

    categories_table = Table(box=box.SIMPLE)
    categories_table.add_column("id")
    categories_table.add_column("kind")
    categories_table.add_column("name")
    categories_table.add_column("type")
    categories_table.add_column("time")
    categories_table.add_column("items", justify="right")

    for routine_category in catalog["routine_categories"]:
        categories_table.add_row(
            routine_category["id"],
            "routine",
            colored(routine_category["name"], routine_category["type"]),
            routine_category["type"],
            routine_category.get("time") or "",
            str(len(routine_category["habits"])),
        )
    for planned_category in catalog["planned_categories"]:
        categories_table.add_row(
            planned_category["id"],
            "planned",
            colored(planned_category["name"], planned_category["type"]),
            planned_category["type"],
            "",
            str(len(planned_category["activities"])),
        )

    console = Console()
    console.print(categories_table)


def routine_category_view(report_name: str, category: RoutineCategory) -> None:
    """Display a routine category and its habits."""
    header(report_name, category["name"])

    habits_table = Table(box=box.SIMPLE)
    habits_table.add_column("id")
    habits_table.add_column("name")
    habits_table.add_column("time")
    habits_table.add_column("duration")
    habits_table.add_column("repeats")
    habits_table.add_column("tracking")

    for habit in category["habits"]:
        tracking = habit.get("tracking_type", "boolean")
        if tracking == "number":
            tracking = f"number {format_optional(habit.get('target'))} {habit.get('unit') or ''}".rstrip()
        habits_table.add_row(
            habit["id"],
            colored(habit["name"], category["type"]),
            habit.get("time") or "",
            habit.get("duration") or "",
            format_recurrence(habit),
            tracking,
        )

    console = Console()
    console.print(habits_table)


def planned_category_view(report_name: str, category: PlannedCategory) -> None:
    """Display a planned category and its activities."""
    header(report_name, category["name"])

    activities_table = Table(box=box.SIMPLE)
    activities_table.add_column("id")
    activities_table.add_column("name")
    activities_table.add_column("time")
    activities_table.add_column("duration")
    activities_table.add_column("repeats")
    activities_table.add_column("priority")

    for activity in category["activities"]:
        activities_table.add_row(
            activity["id"],
            colored(activity["name"], category["type"]),
            activity.get("time") or "",
            activity.get("duration") or "",
            format_recurrence(activity),
            activity.get("priority", "medium"),
        )

    console = Console()
    console.print(activities_table)


def single_habit_view(report_name: str, habit: Habit) -> None:
    header(report_name)

    habit_table = Table(box=box.SIMPLE)
    habit_table.add_column("property")
    habit_table.add_column("value")

    habit_table.add_row("id", habit["id"])
    habit_table.add_row("name", habit["name"])
    habit_table.add_row("time", habit.get("time") or "")
    habit_table.add_row("duration", habit.get("duration") or "")
    habit_table.add_row("repeats", format_recurrence(habit))
    habit_table.add_row("tracking_type", habit.get("tracking_type", "boolean"))
    habit_table.add_row("unit", habit.get("unit") or "")
    habit_table.add_row("target", format_optional(habit.get("target")))
    habit_table.add_row("min", format_optional(habit.get("min")))
    habit_table.add_row("max", format_optional(habit.get("max")))

    console = Console()
    console.print(habit_table)


def single_activity_view(report_name: str, activity: Activity) -> None:
    header(report_name)

    activity_table = Table(box=box.SIMPLE)
    activity_table.add_column("property")
    activity_table.add_column("value")

    activity_table.add_row("id", activity["id"])
    activity_table.add_row("name", activity["name"])
    activity_table.add_row("time", activity.get("time") or "")
    activity_table.add_row("duration", activity.get("duration") or "")
    activity_table.add_row("repeats", format_recurrence(activity))
    activity_table.add_row("priority", activity.get("priority", "medium"))
    activity_table.add_row("description", activity.get("description") or "")

    console = Console()
    console.print(activity_table)
