# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Annotated, Optional

import typer

from habitgrid.model.habit import Habit
from habitgrid.repository.catalog import CATALOG_REPO, CatalogItemNotFoundError
from habitgrid.repository.configuration import CONFIGURATION_REPO
from habitgrid.repository.day_record import DAY_RECORD_REPO
from habitgrid.service.day import planned_entries, routine_groups
from habitgrid.service.progress import day_summary
from habitgrid.service.recurrence import OneTimePolicy
from habitgrid.terminal.custom_typer import AliasedTyperGroup
from habitgrid.terminal.parse import parse_date
from habitgrid.time import date_to_key, today_local
from habitgrid.view.views import day as day_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[str],
    typer.Option(
        "--date",
        "-dt",
        help="YYYY-MM-DD, today/t, yesterday/y, tomorrow/o or a day offset",
    ),
]


def show_day(date: datetime.date) -> None:
    config = CONFIGURATION_REPO.get_config()
    catalog = CATALOG_REPO.get_catalog()
    policy = OneTimePolicy(config["one_time_policy"])

    day_report.day_view(
        "day",
        date,
        routine_groups(catalog, date),
        planned_entries(catalog, date, today_local(), policy),
        DAY_RECORD_REPO.get(date_to_key(date)),
        day_summary(catalog, DAY_RECORD_REPO, date, config["streak_threshold"]),
    )


@app.command("show, s")
def show(
    date: Annotated[
        Optional[str],
        typer.Argument(help="YYYY-MM-DD, today/t, yesterday/y, tomorrow/o or a day offset"),
    ] = None,
) -> None:
    """Show the checklist for a day (today by default)."""
    show_day(parse_date(date))


@app.command("check, c", no_args_is_help=True)
def check(
    id: str,
    date: DateOption = None,
    category_id: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="category id, when the item id is ambiguous"),
    ] = None,
    value: Annotated[
        Optional[float],
        typer.Option("--value", "-v", help="numeric habits: set the value"),
    ] = None,
    step: Annotated[
        Optional[float],
        typer.Option("--step", "-s", help="numeric habits: add to the value (may be negative)"),
    ] = None,
) -> None:
    """
    Toggle a habit or activity for a day. Numeric habits step by 1 unless
    --value or --step is given; values stay within the habit's min and max.
    """
    day = parse_date(date)
    date_key = date_to_key(day)

    if value is not None and step is not None:
        raise typer.BadParameter("Use either --value or --step, not both")

    habit: Optional[Habit] = None
    try:
        if category_id is not None:
            if CATALOG_REPO.is_routine_category(category_id):
                habit = CATALOG_REPO.get_habit(category_id, id)
            else:
                CATALOG_REPO.get_activity(category_id, id)
        elif CATALOG_REPO.has_item_id("routine", id):
            _, habit = CATALOG_REPO.find_habit(id)
        else:
            CATALOG_REPO.find_activity(id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    if habit is not None and habit.get("tracking_type") == "number":
        if value is not None:
            recorded = DAY_RECORD_REPO.set_habit_value(date_key, habit, value)
        else:
            recorded = DAY_RECORD_REPO.step_habit_value(
                date_key, habit, step if step is not None else 1
            )
        logger.info("Set %s on %s to %s", id, date_key, recorded)
    else:
        if value is not None or step is not None:
            raise typer.BadParameter("--value and --step only apply to numeric habits")
        if habit is not None:
            done = DAY_RECORD_REPO.toggle_habit(date_key, habit["id"])
        else:
            done = DAY_RECORD_REPO.toggle_activity(date_key, id)
        logger.info("Marked %s on %s as %s", id, date_key, done)

    show_day(day)


@app.command("reflect, r")
def reflect(
    date: DateOption = None,
    went_well: Annotated[
        Optional[str], typer.Option("--went-well", "-w", help="what went well")
    ] = None,
    improve: Annotated[
        Optional[str], typer.Option("--improve", "-i", help="what to improve")
    ] = None,
    gratitude: Annotated[
        Optional[str], typer.Option("--gratitude", "-g", help="grateful for")
    ] = None,
) -> None:
    """Write the reflection notes for a day."""
    day = parse_date(date)

    if went_well is None and improve is None and gratitude is None:
        typer.echo("Nothing to record: pass --went-well, --improve or --gratitude")
        raise typer.Exit(1)

    DAY_RECORD_REPO.set_reflection(
        date_to_key(day), went_well=went_well, improve=improve, gratitude=gratitude
    )
    show_day(day)
