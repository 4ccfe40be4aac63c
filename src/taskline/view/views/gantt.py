# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from taskline.color import (
    COMPLETED_TASK_COLOR,
    CURRENT_HEADER_STYLE,
    STRIPE_STYLE,
    status_color,
)
from taskline.model.header_cell import HeaderCell
from taskline.model.position import BarPosition, PositionedRow
from taskline.model.render import TimelineRender
from taskline.model.summary import GanttSummary
from taskline.model.task import TASK_STATUS_COMPLETED, TASK_STATUS_IN_PROGRESS
from taskline.model.timeline_window import TimelineWindow
from taskline.service.zoom import ZoomController
from taskline.time import to_local_date
from taskline.view.views.header import header

MIN_TIMELINE_WIDTH = 20
MAX_ASSIGNEES_SHOWN = 3


def gantt_view(
    render: TimelineRender,
    summary: Optional[GanttSummary] = None,
    left_column_width: int = 40,
    timeline_width: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Display projects and their tasks as bars on a gantt chart timeline.

    Bar placement comes straight from the percentages in the render result;
    the zoom only scales how many characters the timeline area gets.

    Args:
        render: Output of the layout pipeline
        summary: Optional counters printed under the chart
        left_column_width: Width of left column for item names (defaults to 40)
        timeline_width: Timeline width at 100% zoom (defaults to the space
            left over in the terminal)
        console: Console to print to (defaults to a new Console)
    """
    if console is None:
        console = Console()

    header("gantt", f"zoom {render['zoom_percent']}%")

    if timeline_width is None:
        timeline_width = max(MIN_TIMELINE_WIDTH, console.width - left_column_width)
    width = ZoomController(render["zoom_percent"]).scale(timeline_width)

    window = render["window"]
    date_range_str = (
        f"{window['min_date'].in_tz('local').format('YYYY-MM-DD')} to "
        f"{window['max_date'].in_tz('local').format('YYYY-MM-DD')}"
    )
    console.print(f"\n[bold]{date_range_str}[/bold] ({window['total_days']} days)\n")

    chart_elements: list[Text] = []
    chart_elements.append(
        _build_header_row(render["header_cells"], window, width, left_column_width)
    )
    chart_elements.append(
        _build_separator(render["header_cells"], window, width, left_column_width)
    )

    if not render["rows"]:
        chart_elements.append(Text("No projects to display", style="dim"))

    for row in render["rows"]:
        chart_elements.append(_build_item_row(row, width, left_column_width))

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))

    if summary is not None:
        console.print(_format_summary(summary))
    console.print()


def bar_columns(position: BarPosition, width: int) -> tuple[int, int]:
    """
    Convert a percentage position into (start column, length) for a given width.

    Zero-width positions (items without a start date) get length 0; any
    other bar is at least one character and never runs past the last column.
    """
    if position["width"] <= 0:
        return 0, 0
    start = min(width - 1, int(math.floor(position["left"] / 100 * width)))
    length = max(1, int(round(position["width"] / 100 * width)))
    length = min(length, width - start)
    return start, length


def cell_columns(
    cells: list[HeaderCell], window: TimelineWindow, width: int
) -> list[tuple[int, int]]:
    """Column span of each header cell, clipped to the timeline width."""
    first = to_local_date(window["min_date"])
    total_days = window["total_days"]
    spans = []
    for cell in cells:
        start_days = (cell["start_date"] - first).days
        end_days = (cell["end_date"] - first).days + 1
        start = min(width, int(math.floor(start_days / total_days * width)))
        end = min(width, int(math.floor(end_days / total_days * width)))
        spans.append((start, max(start, end)))
    return spans


def _build_header_row(
    cells: list[HeaderCell],
    window: TimelineWindow,
    width: int,
    left_column_width: int,
) -> Text:
    row = Text(" " * left_column_width)
    cursor = 0
    for i, (cell, (start, end)) in enumerate(
        zip(cells, cell_columns(cells, window, width))
    ):
        if start > cursor:
            row.append(" " * (start - cursor))
            cursor = start
        span = end - cursor
        if span <= 0:
            continue
        label = cell["label"][:span].ljust(span)
        style = CURRENT_HEADER_STYLE if cell["is_current"] else "dim"
        if i % 2 == 1:
            style = f"{style} {STRIPE_STYLE}"
        row.append(label, style=style)
        cursor = end
    return row


def _build_separator(
    cells: list[HeaderCell],
    window: TimelineWindow,
    width: int,
    left_column_width: int,
) -> Text:
    separator = Text("─" * left_column_width, style="dim")
    cursor = 0
    for i, (start, end) in enumerate(cell_columns(cells, window, width)):
        if end <= cursor:
            continue
        style = f"dim {STRIPE_STYLE}" if i % 2 == 1 else "dim"
        separator.append("─" * (end - cursor), style=style)
        cursor = end
    if cursor < width:
        separator.append("─" * (width - cursor), style="dim")
    return separator


def _build_item_row(row: PositionedRow, width: int, left_column_width: int) -> Text:
    item = row["item"]
    line = Text()

    if item["kind"] == "project":
        marker = "▾" if item["expanded"] else "▸"
        count = len(item["children"] or [])
        left_col = f"{marker} {item['title']} ({count} tasks · {item['progress']}%)"
        left_style = "bold"
    else:
        left_col = f"  {_task_state(item['status'])} {item['title']}"
        assignees = item["assigned_ids"] or []
        if assignees:
            shown = ",".join(a[:2].upper() for a in assignees[:MAX_ASSIGNEES_SHOWN])
            extra = len(assignees) - MAX_ASSIGNEES_SHOWN
            left_col += f" [{shown}{f' +{extra}' if extra > 0 else ''}]"
        left_style = (
            COMPLETED_TASK_COLOR if item["status"] == TASK_STATUS_COMPLETED else ""
        )

    if len(left_col) > left_column_width:
        left_col = left_col[: left_column_width - 3] + "..."
    else:
        left_col = left_col.ljust(left_column_width)
    line.append(left_col, style=left_style)

    start, length = bar_columns(row["position"], width)
    if length == 0:
        line.append(" " * width)
        return line

    color = status_color(item["status"])
    # The overlay marks the unfinished part, starting at the progress point
    filled = int(round(length * row["overlay"]["left"] / 100))
    line.append(" " * start)
    line.append("█" * filled, style=color)
    line.append("░" * (length - filled), style=color)
    line.append(" " * (width - start - length))
    return line


def _task_state(status: str) -> str:
    if status == TASK_STATUS_COMPLETED:
        return "X"
    if status == TASK_STATUS_IN_PROGRESS:
        return "~"
    return " "


def _format_summary(summary: GanttSummary) -> Text:
    text = Text()
    text.append(f"{summary['total_projects']} projects", style="cyan")
    text.append("  ·  ")
    text.append(f"{summary['total_tasks']} tasks", style="magenta")
    text.append("  ·  ")
    text.append(f"{summary['on_track']} on track", style="green")
    text.append("  ·  ")
    text.append(f"{summary['at_risk']} at risk", style="red")
    return text
