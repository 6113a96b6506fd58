# SPDX-License-Identifier: MIT

import logging
from typing import Any

import typer
from rich.console import Console
from rich.table import Table
from habitgrid import configuration
from habitgrid.repository.configuration import CONFIGURATION_REPO
from habitgrid.service.recurrence import OneTimePolicy
from habitgrid.service.timespec import parse_start_slot
from habitgrid.terminal.custom_typer import AliasedTyperGroup
from habitgrid.terminal.parse import parse_weekday_list

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓ Enabled" if value else "✗ Disabled"
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if value is None:
        return "None"
    return str(value)


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "on", "1"):
        return True
    if lowered in ("false", "no", "off", "0"):
        return False
    raise typer.BadParameter(f"{key} expects true or false, got '{value}'")


def parse_setting(key: str, value: str) -> Any:
    """
    Convert a command line value to the type stored for `key`.

    Raises:
        typer.BadParameter: If the key is unknown or the value is invalid for it
    """
    if key not in configuration.DEFAULT_CONFIGURATION:
        raise typer.BadParameter(
            f"Unknown setting: {key}. Valid options: {', '.join(configuration.DEFAULT_CONFIGURATION)}"
        )

    if key in ("show_header", "show_work_block"):
        return _parse_bool(key, value)
    if key == "data_path":
        return None if value.strip().lower() in ("", "none", "default") else value
    if key == "week_starts_on":
        if value not in ("sunday", "monday"):
            raise typer.BadParameter("week_starts_on expects sunday or monday")
        return value
    if key == "rolling_window_days":
        try:
            days = int(value)
        except ValueError:
            raise typer.BadParameter(f"rolling_window_days expects a number, got '{value}'")
        if days < 1:
            raise typer.BadParameter("rolling_window_days must be at least 1")
        return days
    if key == "streak_threshold":
        try:
            threshold = float(value)
        except ValueError:
            raise typer.BadParameter(f"streak_threshold expects a number, got '{value}'")
        if not 0 < threshold <= 1:
            raise typer.BadParameter("streak_threshold must be greater than 0 and at most 1")
        return threshold
    if key == "one_time_policy":
        policies = [policy.value for policy in OneTimePolicy]
        if value not in policies:
            raise typer.BadParameter(
                f"one_time_policy expects one of: {', '.join(policies)}"
            )
        return value
    if key in ("work_start", "work_end"):
        if parse_start_slot(value) is None:
            raise typer.BadParameter(f"{key} must be a time of day, e.g. '9:00 AM'")
        return value
    if key == "work_days":
        return parse_weekday_list(value)
    if key == "log_level":
        level = value.upper()
        if level not in LOG_LEVELS:
            raise typer.BadParameter(f"log_level expects one of: {', '.join(LOG_LEVELS)}")
        return level

    return value


@app.command("show, s")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    for key in configuration.DEFAULT_CONFIGURATION:
        if key == "data_path":
            table.add_row(key, str(configuration.DATA_PATH))
        else:
            table.add_row(key, _format_value(config.get(key)))

    console.print(table)
    console.print(f"\nConfig file: {configuration.APP_CONFIG_PATH}")


@app.command("set", no_args_is_help=True)
def set_setting(key: str, value: str) -> None:
    """Change one configuration setting."""
    parsed = parse_setting(key, value)
    CONFIGURATION_REPO.update_config(**{key: parsed})
    logger.info("Configuration %s set to %r", key, parsed)
    typer.echo(f"{key} = {_format_value(parsed)}")
