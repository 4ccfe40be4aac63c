# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskline.color import (
    COMPLETED_TASK_COLOR,
    TODAY_STYLE,
    priority_color,
    status_color,
)
from taskline.model.calendar_day import CalendarDay, DayDetail
from taskline.model.calendar_mode import CalendarMode, WeekStart
from taskline.model.task import TASK_STATUS_COMPLETED, TaskRecord
from taskline.view.views.header import header

MAX_TASKS_PER_CELL = 3

_WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def weekday_names(week_starts_on: WeekStart = "sunday") -> list[str]:
    if week_starts_on == "monday":
        return list(_WEEKDAY_NAMES)
    return _WEEKDAY_NAMES[-1:] + _WEEKDAY_NAMES[:-1]


def calendar_view(
    days: list[CalendarDay],
    mode: CalendarMode,
    anchor: pendulum.Date,
    week_starts_on: WeekStart = "sunday",
    cell_width: int = 20,
    console: Optional[Console] = None,
) -> None:
    """
    Display a month or week calendar grid with the tasks active on each day.

    Args:
        days: Calendar days in grid order, a multiple of seven
        mode: "month" or "week", used for the title
        anchor: Date the calendar is anchored on
        week_starts_on: First column of the grid
        cell_width: Width of each day cell in characters (defaults to 20)
        console: Console to print to (defaults to a new Console)
    """
    if console is None:
        console = Console()

    if mode == "month":
        header("calendar month")
        title = anchor.format("MMMM YYYY")
    else:
        header("calendar week")
        first = days[0]["date"].format("MMM D")
        last = days[-1]["date"].format("MMM D, YYYY")
        title = f"{first} - {last}"
    console.print(f"\n[bold]{title}[/bold]\n")

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in weekday_names(week_starts_on):
        table.add_column(day_name, style="bold", width=cell_width)

    for week_start in range(0, len(days), 7):
        week = days[week_start : week_start + 7]
        table.add_row(*[render_day_cell(day, cell_width) for day in week])

    console.print(table)
    console.print()


def render_day_cell(day: CalendarDay, cell_width: int = 20) -> Text:
    """Day number followed by up to three tasks and an overflow count."""
    cell = Text()
    day_num = day["date"].day

    if day["is_today"]:
        cell.append(f"{day_num:2d}", style=TODAY_STYLE)
        cell.append("   \n", style=TODAY_STYLE)
    elif not day["in_period"]:
        cell.append(f"{day_num:2d}\n", style="dim")
    else:
        cell.append(f"{day_num:2d}\n", style="bold")

    tasks = day["tasks_in_range"]
    for task in tasks[:MAX_TASKS_PER_CELL]:
        title = task["title"]
        # Account for the priority dot and space
        max_title_len = cell_width - 2
        if len(title) > max_title_len:
            title = title[: max_title_len - 3] + "..."

        style = "dim" if not day["in_period"] else _task_style(task)
        cell.append("● ", style=priority_color(task["priority"]))
        cell.append(f"{title}\n", style=style)

    if len(tasks) > MAX_TASKS_PER_CELL:
        remaining = len(tasks) - MAX_TASKS_PER_CELL
        cell.append(f"  +{remaining} more\n", style="dim")

    return cell


def day_detail_view(detail: DayDetail, console: Optional[Console] = None) -> None:
    """List every task whose date range covers the selected day."""
    if console is None:
        console = Console()

    header("day", detail["date"].format("YYYY-MM-DD ddd"))

    console.print(f"\n[bold]{detail['date'].format('dddd, MMMM D, YYYY')}[/bold]\n")
    if not detail["tasks"]:
        console.print("[dim]No tasks on this day[/dim]\n")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("Task")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("Start")
    table.add_column("End")

    for task in detail["tasks"]:
        table.add_row(
            Text(task["title"], style=_task_style(task)),
            Text(task["status"], style=status_color(task["status"])),
            Text(task["priority"] or "-", style=priority_color(task["priority"])),
            _date_cell(task["start_date"]),
            _date_cell(task["end_date"] or task["due_date"]),
        )

    console.print(table)
    console.print()


def _task_style(task: TaskRecord) -> str:
    if task["status"] == TASK_STATUS_COMPLETED:
        return COMPLETED_TASK_COLOR
    return "white"


def _date_cell(value: Optional[pendulum.DateTime]) -> str:
    if value is None:
        return "-"
    return value.in_tz("local").format("YYYY-MM-DD")
