# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from habitgrid.model.category_type import CategoryType
from habitgrid.time import date_from_key, today_local

CATEGORY_TYPE_NAMES = [category_type.value for category_type in CategoryType]
RECURRING_TYPE_NAMES = ["none", "daily", "weekly", "custom"]
WEEKDAY_FULL_NAMES = [
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
]


def parse_date(date_param: Optional[str]) -> pendulum.Date:
    """
    Parse a day argument, defaulting to today.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o and signed day
    offsets relative to today (e.g. "-1", "+2", "7").

    Raises:
        typer.BadParameter: If the value is not one of the accepted forms
    """
    today = today_local()
    if date_param is None:
        return today

    date = date_param.strip().lower()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_key(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "+7")
    if re.match(r"^[+-]?\d+$", date):
        try:
            return today.add(days=int(date))
        except (OverflowError, ValueError):
            raise typer.BadParameter(f"Date offset out of range: '{date_param}'")

    if date == "today" or date == "t":
        return today
    if date == "yesterday" or date == "y":
        return today.subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today.add(days=1)
    raise typer.BadParameter(f"Incorrect date format: '{date_param}'")


def parse_weekday(weekday_param: str) -> int:
    """
    Parse a weekday given as a number (0 = Sunday .. 6 = Saturday) or a
    name prefix of at least two letters ("su", "mon", "thursday").
    """
    weekday = weekday_param.strip().lower()
    if re.match(r"^\d$", weekday):
        index = int(weekday)
        if 0 <= index <= 6:
            return index
        raise typer.BadParameter(f"Weekday must be between 0 and 6, got {index}")

    if len(weekday) >= 2:
        for index, name in enumerate(WEEKDAY_FULL_NAMES):
            if name.startswith(weekday):
                return index
    raise typer.BadParameter(f"Invalid weekday: '{weekday_param}'")


def parse_weekday_list(weekdays_param: str) -> list[int]:
    """Parse a comma-separated weekday list, e.g. "mon,wed,fri" or "1,3,5"."""
    weekdays = [
        parse_weekday(weekday) for weekday in weekdays_param.split(",") if weekday.strip()
    ]
    if len(weekdays) == 0:
        raise typer.BadParameter("No weekdays provided")
    return sorted(set(weekdays))


def parse_category_type(category_type: str) -> str:
    value = category_type.strip().lower()
    if value not in CATEGORY_TYPE_NAMES:
        raise typer.BadParameter(
            f"Invalid category type: {category_type}. Valid options: {', '.join(CATEGORY_TYPE_NAMES)}"
        )
    return value


def parse_recurrence(
    repeat: Optional[str],
    weekday: Optional[str],
    days: Optional[str],
) -> tuple[Optional[str], Optional[int], Optional[list[int]]]:
    """
    Validate the --repeat/--weekday/--days options of habits and activities.

    Returns:
        (recurring_type, recurring_weekday, recurring_days), each None when
        not given on the command line

    Raises:
        typer.BadParameter: If the combination is incomplete or invalid
    """
    if repeat is not None and repeat not in RECURRING_TYPE_NAMES:
        raise typer.BadParameter(
            f"Invalid repeat: {repeat}. Valid options: {', '.join(RECURRING_TYPE_NAMES)}"
        )

    recurring_weekday = parse_weekday(weekday) if weekday is not None else None
    recurring_days = parse_weekday_list(days) if days is not None else None

    if repeat == "weekly" and recurring_weekday is None:
        raise typer.BadParameter("--repeat weekly needs --weekday")
    if repeat == "custom" and recurring_days is None:
        raise typer.BadParameter("--repeat custom needs --days")
    if recurring_weekday is not None and repeat not in (None, "weekly"):
        raise typer.BadParameter("--weekday only applies to --repeat weekly")
    if recurring_days is not None and repeat not in (None, "custom"):
        raise typer.BadParameter("--days only applies to --repeat custom")

    return repeat, recurring_weekday, recurring_days
