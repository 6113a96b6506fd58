# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated

import typer

from habitgrid.repository.catalog import CATALOG_REPO
from habitgrid.repository.day_record import DAY_RECORD_REPO
from habitgrid.service.legacy import (
    LegacyFormatError,
    export_app_data,
    import_app_data,
    read_app_data_file,
    write_app_data_file,
)
from habitgrid.terminal.custom_typer import AliasedTyperGroup

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("import, i", no_args_is_help=True)
def import_data(
    path: Annotated[
        Path, typer.Argument(exists=True, dir_okay=False, help="app-data JSON file")
    ],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="replace without asking")
    ] = False,
) -> None:
    """Replace the catalog and all day records with an exported JSON file."""
    try:
        catalog, days = import_app_data(read_app_data_file(path))
    except LegacyFormatError as e:
        typer.echo(str(e))
        raise typer.Exit(1)

    if not yes:
        typer.confirm(
            f"Replace the current catalog and day records with {path}?", abort=True
        )

    CATALOG_REPO.replace_catalog(catalog)
    DAY_RECORD_REPO.replace_all(days)

    logger.info("Imported %s (%d days)", path, len(days))
    typer.echo(
        f"Imported {len(catalog['routine_categories'])} routine and "
        f"{len(catalog['planned_categories'])} planned categories, {len(days)} days"
    )


@app.command("export, e", no_args_is_help=True)
def export_data(
    path: Annotated[Path, typer.Argument(dir_okay=False, help="target JSON file")],
) -> None:
    """Write the catalog and all day records as an app-data JSON file."""
    days = DAY_RECORD_REPO.get_all()
    write_app_data_file(path, export_app_data(CATALOG_REPO.get_catalog(), days))

    logger.info("Exported %d days to %s", len(days), path)
    typer.echo(f"Exported {len(days)} days to {path}")
