# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer

from habitgrid.repository.catalog import CATALOG_REPO, CatalogItemNotFoundError
from habitgrid.repository.day_record import DAY_RECORD_REPO
from habitgrid.terminal.custom_typer import AliasedTyperGroup
from habitgrid.terminal.parse import parse_category_type
from habitgrid.view.views import catalog as catalog_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def show_category(id: str) -> None:
    if CATALOG_REPO.is_routine_category(id):
        catalog_report.routine_category_view(
            "routine category", CATALOG_REPO.get_routine_category(id)
        )
    else:
        catalog_report.planned_category_view(
            "planned category", CATALOG_REPO.get_planned_category(id)
        )


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    planned: Annotated[
        bool,
        typer.Option(
            "--planned/--routine",
            "-p/-r",
            help="planned categories hold activities, routine categories hold habits",
        ),
    ] = False,
    category_type: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help="spiritual, health, learning, career, finance, family, social, other",
        ),
    ] = "other",
    time: Annotated[
        Optional[str],
        typer.Option("--time", "-tm", help="routine only, e.g. '5:00 - 6:30 AM'"),
    ] = None,
) -> None:
    """Create a new routine or planned category."""
    category_type = parse_category_type(category_type)

    if planned:
        if time is not None:
            raise typer.BadParameter("--time only applies to routine categories")
        id = CATALOG_REPO.save_new_planned_category(name, category_type)
    else:
        id = CATALOG_REPO.save_new_routine_category(name, category_type, time)

    logger.info("Added category %s (%s)", id, name)
    show_category(id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    category_type: Annotated[Optional[str], typer.Option("--type", "-t")] = None,
    time: Annotated[Optional[str], typer.Option("--time", "-tm")] = None,
    remove_time: Annotated[bool, typer.Option("--remove-time", "-rtm")] = False,
) -> None:
    if category_type is not None:
        category_type = parse_category_type(category_type)

    try:
        if (time is not None or remove_time) and not CATALOG_REPO.is_routine_category(
            id
        ):
            raise typer.BadParameter("--time only applies to routine categories")
        CATALOG_REPO.modify_category(id, name, category_type, time, remove_time)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    show_category(id)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    purge_history: Annotated[
        bool,
        typer.Option(
            "--purge-history",
            help="also remove recorded marks for the category's items",
        ),
    ] = False,
) -> None:
    """Delete a category with all of its habits or activities."""
    try:
        if CATALOG_REPO.is_routine_category(id):
            category = CATALOG_REPO.get_routine_category(id)
            item_ids = [habit["id"] for habit in category["habits"]]
            section = "routine"
        else:
            planned_category = CATALOG_REPO.get_planned_category(id)
            item_ids = [activity["id"] for activity in planned_category["activities"]]
            section = "planned"
        CATALOG_REPO.delete_category(id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    if purge_history:
        for item_id in item_ids:
            if not CATALOG_REPO.has_item_id(section, item_id):
                DAY_RECORD_REPO.delete_item_marks(section, item_id)

    logger.info("Deleted category %s", id)
    typer.echo(f"Deleted category {id}")


@app.command("list, ls")
def list_categories() -> None:
    catalog_report.categories_view("categories", CATALOG_REPO.get_catalog())


@app.command("show, s", no_args_is_help=True)
def show(id: str) -> None:
    try:
        show_category(id)
    except CatalogItemNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
