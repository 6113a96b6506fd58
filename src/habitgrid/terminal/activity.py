# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional, cast

import typer

from habitgrid.model.activity import Priority
from habitgrid.model.schedulable import RecurringType
from habitgrid.repository.catalog import CATALOG_REPO, CatalogItemNotFoundError
from habitgrid.repository.day_record import DAY_RECORD_REPO
from habitgrid.template.activity import get_activity_template
from habitgrid.terminal.custom_typer import AliasedTyperGroup
from habitgrid.terminal.habit import DaysOption, RepeatOption, WeekdayOption
from habitgrid.terminal.parse import parse_date, parse_recurrence
from habitgrid.time import date_to_key
from habitgrid.view.views import catalog as catalog_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

PRIORITIES = ["high", "medium", "low"]

CategoryOption = Annotated[
    Optional[str],
    typer.Option(
        "--category", "-c", help="category id, when the activity id is ambiguous"
    ),
]


def parse_priority(priority: str) -> Priority:
    if priority not in PRIORITIES:
        raise typer.BadParameter(
            f"Invalid priority: {priority}. Valid options: {', '.join(PRIORITIES)}"
        )
    return cast(Priority, priority)


def resolve_category_id(id: str, category_id: Optional[str]) -> str:
    if category_id is not None:
        return category_id
    category, _ = CATALOG_REPO.find_activity(id)
    return category["id"]


@app.command("add, a", no_args_is_help=True)
def add(
    category_id: str,
    name: str,
    time: Annotated[
        Optional[str],
        typer.Option("--time", "-tm", help="e.g. '8:15 PM', 'AM Commute'"),
    ] = None,
    duration: Annotated[
        Optional[str],
        typer.Option("--duration", "-du", help="e.g. '30 min', '1.5 hours'"),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-dt",
            help="one-time due date: YYYY-MM-DD, today, tomorrow or a day offset",
        ),
    ] = None,
    priority: Annotated[
        str, typer.Option("--priority", "-p", help="high, medium, low")
    ] = "medium",
    description: Annotated[
        Optional[str], typer.Option("--description", "-de")
    ] = None,
    repeat: RepeatOption = "none",
    weekday: WeekdayOption = None,
    days: DaysOption = None,
) -> None:
    """Add an activity to a planned category."""
    recurring_type, recurring_weekday, recurring_days = parse_recurrence(
        repeat, weekday, days
    )
    if date is not None and recurring_type not in (None, "none"):
        raise typer.BadParameter("--date only applies to one-time activities")

    activity = get_activity_template()
    activity["name"] = name
    activity["time"] = time
    activity["duration"] = duration
    activity["date"] = date_to_key(parse_date(date)) if date is not None else None
    activity["priority"] = parse_priority(priority)
    activity["description"] = description
    activity["recurring_type"] = cast(RecurringType, recurring_type or "none")
    activity["recurring_weekday"] = recurring_weekday
    activity["recurring_days"] = recurring_days

    try:
        id = CATALOG_REPO.save_new_activity(category_id, activity)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    logger.info("Added activity %s to %s", id, category_id)
    catalog_report.single_activity_view(
        "activity", CATALOG_REPO.get_activity(category_id, id)
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    category_id: CategoryOption = None,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    time: Annotated[Optional[str], typer.Option("--time", "-tm")] = None,
    duration: Annotated[Optional[str], typer.Option("--duration", "-du")] = None,
    date: Annotated[Optional[str], typer.Option("--date", "-dt")] = None,
    priority: Annotated[Optional[str], typer.Option("--priority", "-p")] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-de")
    ] = None,
    repeat: RepeatOption = None,
    weekday: WeekdayOption = None,
    days: DaysOption = None,
    remove_time: Annotated[bool, typer.Option("--remove-time", "-rtm")] = False,
    remove_duration: Annotated[bool, typer.Option("--remove-duration", "-rdu")] = False,
    remove_date: Annotated[bool, typer.Option("--remove-date", "-rdt")] = False,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rde")
    ] = False,
) -> None:
    recurring_type, recurring_weekday, recurring_days = parse_recurrence(
        repeat, weekday, days
    )
    date_key = date_to_key(parse_date(date)) if date is not None else None

    try:
        category_id = resolve_category_id(id, category_id)
        CATALOG_REPO.modify_activity(
            category_id,
            id,
            name=name,
            time=time,
            duration=duration,
            date=date_key,
            priority=parse_priority(priority) if priority is not None else None,
            description=description,
            recurring_type=cast(Optional[RecurringType], recurring_type),
            recurring_weekday=recurring_weekday,
            recurring_days=recurring_days,
            remove_time=remove_time,
            remove_duration=remove_duration,
            remove_date=remove_date,
            remove_description=remove_description,
        )
        activity = CATALOG_REPO.get_activity(category_id, id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    catalog_report.single_activity_view("activity", activity)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    category_id: CategoryOption = None,
    purge_history: Annotated[
        bool,
        typer.Option(
            "--purge-history", help="also remove recorded marks for the activity"
        ),
    ] = False,
) -> None:
    try:
        category_id = resolve_category_id(id, category_id)
        CATALOG_REPO.delete_activity(category_id, id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    if purge_history and not CATALOG_REPO.has_item_id("planned", id):
        DAY_RECORD_REPO.delete_item_marks("planned", id)

    logger.info("Deleted activity %s from %s", id, category_id)
    typer.echo(f"Deleted activity {id}")


@app.command("show, s", no_args_is_help=True)
def show(id: str, category_id: CategoryOption = None) -> None:
    try:
        category_id = resolve_category_id(id, category_id)
        activity = CATALOG_REPO.get_activity(category_id, id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    catalog_report.single_activity_view("activity", activity)
