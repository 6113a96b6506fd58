# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from habitgrid.repository.catalog import CATALOG_REPO
from habitgrid.repository.configuration import CONFIGURATION_REPO
from habitgrid.repository.day_record import DAY_RECORD_REPO
from habitgrid.service.calendar import WorkSchedule, build_week, week_start_for
from habitgrid.service.progress import (
    MAX_STREAK_DAYS,
    activity_performance,
    all_habits,
    calculate_streak,
    category_performance,
    daily_series,
    habit_performance,
    monthly_summary,
    rank_items,
    weekly_summaries,
)
from habitgrid.terminal.custom_typer import AliasedTyperGroup
from habitgrid.terminal.parse import parse_date
from habitgrid.time import date_range_back, today_local
from habitgrid.view.views import calendar as calendar_report
from habitgrid.view.views import progress as progress_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _window_days(window: Optional[int]) -> int:
    if window is None:
        return CONFIGURATION_REPO.get_config()["rolling_window_days"]
    if window < 1:
        raise typer.BadParameter("--window must be at least 1")
    return window


@app.command("calendar, c")
def calendar(
    date: Annotated[
        Optional[str],
        typer.Argument(help="any day of the week to show (default today)"),
    ] = None,
    show_work: Annotated[
        Optional[bool],
        typer.Option(
            "--work/--no-work",
            help="override the show_work_block setting",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Show the repeating weekly schedule as a time grid."""
    config = CONFIGURATION_REPO.get_config()
    first_weekday = 1 if config["week_starts_on"] == "monday" else 0
    week_start = week_start_for(parse_date(date), first_weekday)

    if show_work is None:
        show_work = config["show_work_block"]

    work_schedule: Optional[WorkSchedule] = None
    if show_work:
        work_schedule = {
            "start": config["work_start"],
            "end": config["work_end"],
            "days": config["work_days"],
        }

    days = build_week(CATALOG_REPO.get_catalog(), week_start, work_schedule)
    calendar_report.week_calendar_view("calendar", days)


@app.command("progress, p")
def progress(
    window: Annotated[
        Optional[int],
        typer.Option("--window", "-w", help="days shown (default rolling_window_days)"),
    ] = None,
    weeks: Annotated[int, typer.Option("--weeks", help="weekly averages shown")] = 4,
) -> None:
    """Show daily completion, weekly averages and the current streak."""
    config = CONFIGURATION_REPO.get_config()
    window_days = _window_days(window)
    today = today_local()
    habits = all_habits(CATALOG_REPO.get_catalog())

    progress_report.progress_view(
        "progress",
        daily_series(habits, DAY_RECORD_REPO, date_range_back(today, window_days)),
        weekly_summaries(habits, DAY_RECORD_REPO, today, weeks),
        monthly_summary(habits, DAY_RECORD_REPO, today),
        calculate_streak(
            habits, DAY_RECORD_REPO, today, config["streak_threshold"], MAX_STREAK_DAYS
        ),
    )


@app.command("stats, st")
def stats(
    window: Annotated[
        Optional[int],
        typer.Option("--window", "-w", help="days considered (default rolling_window_days)"),
    ] = None,
) -> None:
    """Show struggling and strong habits and activities, and category completion."""
    window_days = _window_days(window)
    today = today_local()
    catalog = CATALOG_REPO.get_catalog()

    progress_report.stats_view(
        "stats",
        window_days,
        rank_items(habit_performance(catalog, DAY_RECORD_REPO, today, window_days)),
        rank_items(activity_performance(catalog, DAY_RECORD_REPO, today, window_days)),
        category_performance(catalog, DAY_RECORD_REPO, today, window_days),
    )
