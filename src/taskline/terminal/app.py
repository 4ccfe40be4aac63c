# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from taskline.logger import configure_logging
from taskline.terminal import configuration, view
from taskline.terminal.custom_typer import OrderedAliasedTyperGroup
from taskline.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Taskline - Project timelines and task calendars in the CLI",
    no_args_is_help=True,
)
app.command(name="gantt, g")(view.gantt)
app.command(name="cal-month, cm")(view.cal_month)
app.command(name="cal-week, cw")(view.cal_week)
app.command(name="day, d")(view.day)
app.command(name="summary, s")(view.summary)
app.add_typer(configuration.app, name="config, c")


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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-vb",
            help="Log debug output to stderr",
        ),
    ] = False,
) -> None:
    """
    Taskline - Project timelines and task calendars in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
