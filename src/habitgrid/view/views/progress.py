# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from habitgrid.service.progress import (
    CategoryStat,
    DayRate,
    ItemStat,
    MonthlySummary,
    Rankings,
    WeeklySummary,
)
from habitgrid.view.views.header import header
from habitgrid.view.views.util import colored, progress_bar


def progress_view(
    report_name: str,
    series: list[DayRate],
    weeks: list[WeeklySummary],
    month: MonthlySummary,
    streak: int,
) -> None:
    """
    Display daily completion for the rolling window, weekly averages and
    the 30 day summary.
    """
    header(report_name, f"streak {streak}")

    daily_table = Table(box=box.SIMPLE, title="daily", title_justify="left")
    daily_table.add_column("date")
    daily_table.add_column("done", justify="right")
    daily_table.add_column("")
    daily_table.add_column("%", justify="right")

    for day in series:
        if day["has_data"]:
            done = f"{day['done']}/{day['total']}"
            bar = progress_bar(day["percentage"])
            percentage = str(day["percentage"])
        else:
            done, bar, percentage = "", "[grey30]no record[/grey30]", ""
        daily_table.add_row(day["date"].format("ddd MMM D"), done, bar, percentage)

    weekly_table = Table(box=box.SIMPLE, title="weekly", title_justify="left")
    weekly_table.add_column("week of")
    weekly_table.add_column("")
    weekly_table.add_column("avg %", justify="right")
    for week in weeks:
        weekly_table.add_row(
            week["label"], progress_bar(week["average"]), str(week["average"])
        )

    console = Console()
    console.print(daily_table)
    console.print(weekly_table)
    console.print(
        f" 30 days: average {month['average']}%, "
        f"{month['perfect_days']} perfect of {month['active_days']} recorded days"
    )


def _item_table(title: str, stats: list[ItemStat]) -> Table:
    item_table = Table(box=box.SIMPLE, title=title, title_justify="left")
    item_table.add_column("name")
    item_table.add_column("category")
    item_table.add_column("done", justify="right")
    item_table.add_column("%", justify="right")
    for stat in stats:
        item_table.add_row(
            colored(stat["name"], stat["category_type"]),
            stat["category"],
            f"{stat['completed']}/{stat['tracked']}",
            str(stat["rate"]),
        )
    return item_table


def stats_view(
    report_name: str,
    window_days: int,
    habit_rankings: Rankings,
    activity_rankings: Rankings,
    categories: list[CategoryStat],
) -> None:
    """Display struggling and strong items and per category completion."""
    header(report_name, f"last {window_days} days")

    console = Console()
    console.print(_item_table("struggling habits", habit_rankings["struggling"]))
    console.print(_item_table("strong habits", habit_rankings["strong"]))
    console.print(_item_table("struggling activities", activity_rankings["struggling"]))
    console.print(_item_table("strong activities", activity_rankings["strong"]))

    category_table = Table(box=box.SIMPLE, title="categories", title_justify="left")
    category_table.add_column("category")
    category_table.add_column("done", justify="right")
    category_table.add_column("")
    category_table.add_column("%", justify="right")
    for category in categories:
        category_table.add_row(
            colored(category["name"], category["type"]),
            f"{category['total_completed']}/{category['total_possible']}",
            progress_bar(category["rate"]),
            str(category["rate"]),
        )
    console.print(category_table)
