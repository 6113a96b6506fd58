# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from habitgrid.terminal import (
    activity,
    category,
    configuration,
    data,
    day,
    habit,
    view,
)
from habitgrid.terminal.custom_typer import OrderedAliasedTyperGroup
from habitgrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="habitgrid - Daily habits and planned activities in the CLI",
    no_args_is_help=True,
)
app.add_typer(day.app, name="day, d")
app.add_typer(view.app, name="view, v")
app.add_typer(category.app, name="category, c")
app.add_typer(habit.app, name="habit, h")
app.add_typer(activity.app, name="activity, a")
app.add_typer(data.app, name="data, da")
app.add_typer(configuration.app, name="config, cf")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    habitgrid - Daily habits and planned activities in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
