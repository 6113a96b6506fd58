# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional, cast

import typer

from habitgrid.model.habit import Habit
from habitgrid.model.schedulable import RecurringType
from habitgrid.repository.catalog import CATALOG_REPO, CatalogItemNotFoundError
from habitgrid.repository.day_record import DAY_RECORD_REPO
from habitgrid.template.habit import get_habit_template
from habitgrid.terminal.custom_typer import AliasedTyperGroup
from habitgrid.terminal.parse import parse_recurrence
from habitgrid.view.views import catalog as catalog_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

RepeatOption = Annotated[
    Optional[str],
    typer.Option("--repeat", "-r", help="none, daily, weekly, custom"),
]
WeekdayOption = Annotated[
    Optional[str],
    typer.Option("--weekday", "-w", help="weekly only: sun..sat or 0-6"),
]
DaysOption = Annotated[
    Optional[str],
    typer.Option("--days", "-ds", help="custom only: e.g. mon,wed,fri"),
]
CategoryOption = Annotated[
    Optional[str],
    typer.Option("--category", "-c", help="category id, when the habit id is ambiguous"),
]


def validate_numeric_bounds(habit: Habit) -> None:
    """Numeric habits need min <= target <= max for whichever bounds are set."""
    bounds = [
        value
        for value in (habit.get("min"), habit.get("target"), habit.get("max"))
        if value is not None
    ]
    if bounds != sorted(bounds):
        raise typer.BadParameter("Expected min <= target <= max")


def _apply_bounds(
    habit: Habit,
    target: Optional[float],
    min: Optional[float],
    max: Optional[float],
    remove_target: bool,
    remove_min: bool,
    remove_max: bool,
) -> Habit:
    prospective = cast(Habit, dict(habit))
    for key, value, remove in (
        ("target", target, remove_target),
        ("min", min, remove_min),
        ("max", max, remove_max),
    ):
        if value is not None:
            prospective[key] = value  # type: ignore[literal-required]
        if remove:
            prospective[key] = None  # type: ignore[literal-required]
    return prospective


def resolve_category_id(id: str, category_id: Optional[str]) -> str:
    if category_id is not None:
        return category_id
    category, _ = CATALOG_REPO.find_habit(id)
    return category["id"]


@app.command("add, a", no_args_is_help=True)
def add(
    category_id: str,
    name: str,
    time: Annotated[
        Optional[str],
        typer.Option("--time", "-tm", help="e.g. '6:00 AM', 'Morning', 'All day'"),
    ] = None,
    duration: Annotated[
        Optional[str],
        typer.Option("--duration", "-du", help="e.g. '30 min', '1.5 hours'"),
    ] = None,
    number: Annotated[
        bool,
        typer.Option("--number/--boolean", help="track a numeric value instead of done/not done"),
    ] = False,
    unit: Annotated[Optional[str], typer.Option("--unit", "-u")] = None,
    target: Annotated[Optional[float], typer.Option("--target", "-tg")] = None,
    min: Annotated[Optional[float], typer.Option("--min")] = None,
    max: Annotated[Optional[float], typer.Option("--max")] = None,
    repeat: RepeatOption = "daily",
    weekday: WeekdayOption = None,
    days: DaysOption = None,
) -> None:
    """Add a habit to a routine category."""
    recurring_type, recurring_weekday, recurring_days = parse_recurrence(
        repeat, weekday, days
    )

    habit = get_habit_template()
    habit["name"] = name
    habit["time"] = time
    habit["duration"] = duration
    habit["tracking_type"] = "number" if number else "boolean"
    if number:
        habit["unit"] = unit
        habit["target"] = target
        habit["min"] = min
        habit["max"] = max
        validate_numeric_bounds(habit)
    elif any(value is not None for value in (unit, target, min, max)):
        raise typer.BadParameter("--unit/--target/--min/--max need --number")
    habit["recurring_type"] = cast(RecurringType, recurring_type or "daily")
    habit["recurring_weekday"] = recurring_weekday
    habit["recurring_days"] = recurring_days

    try:
        id = CATALOG_REPO.save_new_habit(category_id, habit)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    logger.info("Added habit %s to %s", id, category_id)
    catalog_report.single_habit_view("habit", CATALOG_REPO.get_habit(category_id, id))


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    category_id: CategoryOption = None,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    time: Annotated[Optional[str], typer.Option("--time", "-tm")] = None,
    duration: Annotated[Optional[str], typer.Option("--duration", "-du")] = None,
    number: Annotated[
        Optional[bool], typer.Option("--number/--boolean", show_default=False)
    ] = None,
    unit: Annotated[Optional[str], typer.Option("--unit", "-u")] = None,
    target: Annotated[Optional[float], typer.Option("--target", "-tg")] = None,
    min: Annotated[Optional[float], typer.Option("--min")] = None,
    max: Annotated[Optional[float], typer.Option("--max")] = None,
    repeat: RepeatOption = None,
    weekday: WeekdayOption = None,
    days: DaysOption = None,
    remove_time: Annotated[bool, typer.Option("--remove-time", "-rtm")] = False,
    remove_duration: Annotated[bool, typer.Option("--remove-duration", "-rdu")] = False,
    remove_unit: Annotated[bool, typer.Option("--remove-unit", "-ru")] = False,
    remove_target: Annotated[bool, typer.Option("--remove-target", "-rtg")] = False,
    remove_min: Annotated[bool, typer.Option("--remove-min")] = False,
    remove_max: Annotated[bool, typer.Option("--remove-max")] = False,
) -> None:
    recurring_type, recurring_weekday, recurring_days = parse_recurrence(
        repeat, weekday, days
    )

    try:
        category_id = resolve_category_id(id, category_id)
        current = CATALOG_REPO.get_habit(category_id, id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    prospective = _apply_bounds(
        current, target, min, max, remove_target, remove_min, remove_max
    )
    if number or (number is None and current.get("tracking_type") == "number"):
        validate_numeric_bounds(prospective)

    CATALOG_REPO.modify_habit(
        category_id,
        id,
        name=name,
        time=time,
        duration=duration,
        tracking_type=None if number is None else ("number" if number else "boolean"),
        unit=unit,
        target=target,
        min=min,
        max=max,
        recurring_type=cast(Optional[RecurringType], recurring_type),
        recurring_weekday=recurring_weekday,
        recurring_days=recurring_days,
        remove_time=remove_time,
        remove_duration=remove_duration,
        remove_unit=remove_unit,
        remove_target=remove_target,
        remove_min=remove_min,
        remove_max=remove_max,
    )

    catalog_report.single_habit_view("habit", CATALOG_REPO.get_habit(category_id, id))


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    category_id: CategoryOption = None,
    purge_history: Annotated[
        bool,
        typer.Option("--purge-history", help="also remove recorded marks for the habit"),
    ] = False,
) -> None:
    try:
        category_id = resolve_category_id(id, category_id)
        CATALOG_REPO.delete_habit(category_id, id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    if purge_history and not CATALOG_REPO.has_item_id("routine", id):
        DAY_RECORD_REPO.delete_item_marks("routine", id)

    logger.info("Deleted habit %s from %s", id, category_id)
    typer.echo(f"Deleted habit {id}")


@app.command("show, s", no_args_is_help=True)
def show(id: str, category_id: CategoryOption = None) -> None:
    try:
        category_id = resolve_category_id(id, category_id)
        habit = CATALOG_REPO.get_habit(category_id, id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    catalog_report.single_habit_view("habit", habit)
