# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from taskline.model.calendar_mode import CalendarMode
from taskline.model.render import FILTER_ALL
from taskline.repository.configuration import CONFIGURATION_REPO
from taskline.repository.snapshot import SNAPSHOT_REPO
from taskline.service.session import TimelineSession
from taskline.service.summary import calendar_summary, gantt_summary
from taskline.terminal.parse import parse_datetime, parse_granularity, parse_zoom
from taskline.time import now_local, to_local_date
from taskline.view.state import get_week_starts_on
from taskline.view.views.calendar import calendar_view, day_detail_view
from taskline.view.views.gantt import gantt_view
from taskline.view.views.summary import summary_view

logger = logging.getLogger(__name__)

console = Console()

DATE_HELP = "YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def gantt(
    granularity: Annotated[
        Optional[str],
        typer.Option(
            "--granularity",
            "-g",
            help="Header granularity: day, week, or month (defaults to config)",
        ),
    ] = None,
    zoom: Annotated[
        Optional[int],
        typer.Option(
            "--zoom",
            "-z",
            help="Timeline width in percent, 50 to 150 in steps of 10",
        ),
    ] = None,
    active_only: Annotated[
        bool,
        typer.Option(
            "--active-only",
            "-a",
            help="Only show active projects and drop unassigned tasks",
        ),
    ] = False,
    collapse: Annotated[
        Optional[list[str]],
        typer.Option("--collapse", "-c", help="Collapse the project with this id"),
    ] = None,
    collapse_all: Annotated[
        bool,
        typer.Option("--collapse-all", "-ca", help="Collapse every project"),
    ] = False,
    show_summary: Annotated[
        bool,
        typer.Option("--summary/--no-summary", help="Show counters under the chart"),
    ] = True,
    left_width: Annotated[
        int,
        typer.Option("--left-width", "-lw", help="Width of left column for item names"),
    ] = 40,
) -> None:
    """Display projects and their tasks on a gantt chart timeline."""
    config = CONFIGURATION_REPO.get_config()
    session = _load_session(zoom)
    session.set_granularity(
        parse_granularity(granularity)
        if granularity is not None
        else config["default_granularity"]
    )
    session.set_active_only(active_only)

    if collapse_all:
        for project_id in session.expansion.snapshot():
            session.expansion.set_expanded(project_id, False)
    for project_id in collapse or []:
        session.expansion.set_expanded(project_id, False)

    now = now_local()
    render = session.render(now)
    summary = None
    if show_summary:
        summary = gantt_summary(session.projects, session.tasks, session.tree(now), now)

    gantt_view(render, summary, left_column_width=left_width)


def cal_month(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--date", "-d", parser=parse_datetime, help=f"Month to show ({DATE_HELP})"
        ),
    ] = None,
    steps: Annotated[
        int,
        typer.Option("--steps", "-n", help="Move forward (or back) this many months"),
    ] = 0,
    status: Annotated[
        str, typer.Option("--status", "-st", help="Only tasks with this status")
    ] = FILTER_ALL,
    priority: Annotated[
        str, typer.Option("--priority", "-p", help="Only tasks with this priority")
    ] = FILTER_ALL,
    cell_width: Annotated[
        int, typer.Option("--cell-width", "-w", help="Width of each day cell")
    ] = 20,
) -> None:
    """Display a month calendar with the tasks active on each day."""
    _calendar("month", date, steps, status, priority, cell_width)


def cal_week(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--date", "-d", parser=parse_datetime, help=f"Week to show ({DATE_HELP})"
        ),
    ] = None,
    steps: Annotated[
        int,
        typer.Option("--steps", "-n", help="Move forward (or back) this many weeks"),
    ] = 0,
    status: Annotated[
        str, typer.Option("--status", "-st", help="Only tasks with this status")
    ] = FILTER_ALL,
    priority: Annotated[
        str, typer.Option("--priority", "-p", help="Only tasks with this priority")
    ] = FILTER_ALL,
    cell_width: Annotated[
        int, typer.Option("--cell-width", "-w", help="Width of each day cell")
    ] = 20,
) -> None:
    """Display a week calendar with the tasks active on each day."""
    _calendar("week", date, steps, status, priority, cell_width)


def day(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Argument(parser=parse_datetime, help=f"Day to show ({DATE_HELP})"),
    ] = None,
    status: Annotated[
        str, typer.Option("--status", "-st", help="Only tasks with this status")
    ] = FILTER_ALL,
    priority: Annotated[
        str, typer.Option("--priority", "-p", help="Only tasks with this priority")
    ] = FILTER_ALL,
) -> None:
    """List the tasks whose date range covers a single day."""
    session = _load_session()
    session.set_filters(status_filter=status, priority_filter=priority)

    selected = to_local_date(date) if date is not None else to_local_date(now_local())
    day_detail_view(session.day_click(selected))


def summary() -> None:
    """Display project and task counters."""
    session = _load_session()
    now = now_local()
    summary_view(
        gantt_summary(session.projects, session.tasks, session.tree(now), now),
        calendar_summary(session.tasks, now),
    )


def _calendar(
    mode: CalendarMode,
    date: Optional[pendulum.DateTime],
    steps: int,
    status: str,
    priority: str,
    cell_width: int,
) -> None:
    session = _load_session()
    session.set_filters(status_filter=status, priority_filter=priority)
    session.set_calendar(mode=mode, anchor=date)

    now = now_local()
    if steps:
        session.navigate(steps, now)

    render = session.render(now)
    anchor = session.options["calendar_anchor"] or now
    calendar_view(
        render["calendar_days"],
        mode,
        to_local_date(anchor),
        week_starts_on=session.week_starts_on,
        cell_width=cell_width,
    )


def _load_session(zoom: Optional[int] = None) -> TimelineSession:
    """Build a session over the current snapshot using the configured defaults."""
    config = CONFIGURATION_REPO.get_config()
    try:
        projects = SNAPSHOT_REPO.get_all_projects()
        tasks = SNAPSHOT_REPO.get_all_tasks()
    except ValueError as e:
        console.print(f"[red]Could not read the snapshot: {e}[/red]")
        raise typer.Exit(1)

    session = TimelineSession(
        granularity=config["default_granularity"],
        zoom_percent=parse_zoom(zoom) if zoom is not None else config["default_zoom"],
        week_starts_on=get_week_starts_on(),
        padding_days=config["padding_days"],
    )
    session.refresh(projects, tasks)
    logger.debug("Session ready with options %s", session.options)
    return session
