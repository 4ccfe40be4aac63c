# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table

from taskline.model.summary import CalendarSummary, GanttSummary
from taskline.view.views.header import header


def summary_view(
    gantt: GanttSummary,
    calendar: CalendarSummary,
    console: Optional[Console] = None,
) -> None:
    """Print the gantt and calendar counters side by side in one table."""
    if console is None:
        console = Console()

    header("summary")

    table = Table()
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Projects", str(gantt["total_projects"]))
    table.add_row("Tasks", str(gantt["total_tasks"]))
    table.add_row("On track", f"[green]{gantt['on_track']}[/green]")
    table.add_row("At risk", f"[red]{gantt['at_risk']}[/red]")
    table.add_section()
    table.add_row("Completed", str(calendar["completed_tasks"]))
    table.add_row("Urgent", str(calendar["urgent_tasks"]))
    table.add_row("Today", str(calendar["today_tasks"]))
    table.add_row("Completion rate", f"{calendar['completion_rate']}%")

    console.print(table)
