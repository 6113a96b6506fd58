# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from habitgrid.model.calendar_event import CalendarDay, CalendarEvent
from habitgrid.model.category_type import category_color
from habitgrid.service.recurrence import WEEKDAY_NAMES
from habitgrid.service.timespec import (
    DAY_START_HOUR,
    SLOTS_PER_DAY,
    SLOTS_PER_HOUR,
    slot_to_label,
)
from habitgrid.view.views.header import header


def _event_line(event: CalendarEvent) -> Text:
    color = category_color(event["category_type"])
    end_label = slot_to_label(event["start_slot"] + event["duration_slots"])
    line = Text()
    line.append("■ ", style=color)
    line.append(f"{slot_to_label(event['start_slot'])}-{end_label} ", style="dim")
    line.append(event["name"], style=color)
    if event["total_columns"] > 1:
        line.append(
            f" {event['column'] + 1}/{event['total_columns']}", style="dim"
        )
    return line


def week_calendar_view(report_name: str, days: list[CalendarDay]) -> None:
    """
    Display a week as a grid with one row per hour from 04:00.

    Each event is listed in the row of the hour it starts in. Events that
    share time with others carry their column position, e.g. "2/3".
    """
    if not days:
        return

    first = days[0]["date"]
    last = days[-1]["date"]
    header(report_name, f"{first.format('MMM D')} - {last.format('MMM D, YYYY')}")

    calendar_table = Table(box=box.SIMPLE_HEAD, show_lines=False, expand=True)
    calendar_table.add_column("", style="dim", no_wrap=True)
    for day in days:
        calendar_table.add_column(
            f"{WEEKDAY_NAMES[day['weekday']]} {day['date'].format('D')}",
            overflow="fold",
        )

    calendar_table.add_row(
        "all day",
        *[
            Text("\n".join(item["name"] for item in day["all_day"]), style="dim")
            for day in days
        ],
    )

    hours = SLOTS_PER_DAY // SLOTS_PER_HOUR
    for hour_offset in range(hours):
        row_start = hour_offset * SLOTS_PER_HOUR
        row_end = row_start + SLOTS_PER_HOUR
        cells: list[Text] = []
        for day in days:
            cell = Text()
            for event in day["events"]:
                if row_start <= event["start_slot"] < row_end:
                    if cell.plain:
                        cell.append("\n")
                    cell.append(_event_line(event))
            cells.append(cell)
        calendar_table.add_row(f"{DAY_START_HOUR + hour_offset:02d}:00", *cells)

    console = Console()
    console.print(calendar_table)
