# SPDX-License-Identifier: MIT

import math
from typing import Callable, Optional

import pendulum

from taskline.model.granularity_type import GranularityType
from taskline.model.header_cell import HeaderCell
from taskline.model.timeline_window import TimelineWindow
from taskline.time import to_local_date, today_local

WEEK_BLOCK_DAYS = 7
# Fixed blocks, not calendar months
MONTH_BLOCK_DAYS = 30

LabelFormatter = Callable[[pendulum.Date, pendulum.Date], str]


def generate_header_cells(
    window: TimelineWindow,
    granularity: GranularityType,
    today: Optional[pendulum.Date] = None,
) -> list[HeaderCell]:
    """
    Partition the timeline window into contiguous header cells.

    Day cells cover every local date from min_date to max_date inclusive.
    Week and month cells are fixed 7 and 30 day blocks counted from min_date,
    so they are not aligned to calendar weeks or months.

    Args:
        window: The resolved timeline window
        granularity: "day", "week", or "month"
        today: The date flagged as current (defaults to today, local time)

    Returns:
        Ordered header cells, also used for the striped background grid
    """
    if today is None:
        today = today_local()

    if granularity == "day":
        return _day_cells(window, today)
    if granularity == "week":
        return _block_cells(window, today, WEEK_BLOCK_DAYS, _week_label)
    if granularity == "month":
        return _block_cells(window, today, MONTH_BLOCK_DAYS, _month_label)

    raise ValueError(f"Unsupported granularity: {granularity}")


def _day_cells(window: TimelineWindow, today: pendulum.Date) -> list[HeaderCell]:
    cells: list[HeaderCell] = []
    current = to_local_date(window["min_date"])
    last = to_local_date(window["max_date"])

    while current <= last:
        cells.append(
            {
                "label": current.format("ddd D"),
                "start_date": current,
                "end_date": current,
                "is_current": current == today,
            }
        )
        current = current.add(days=1)

    return cells


def _block_cells(
    window: TimelineWindow,
    today: pendulum.Date,
    block_days: int,
    label: LabelFormatter,
) -> list[HeaderCell]:
    cells: list[HeaderCell] = []
    first = to_local_date(window["min_date"])

    for i in range(math.ceil(window["total_days"] / block_days)):
        start = first.add(days=i * block_days)
        end = start.add(days=block_days - 1)
        cells.append(
            {
                "label": label(start, end),
                "start_date": start,
                "end_date": end,
                "is_current": start <= today <= end,
            }
        )

    return cells


def _week_label(start: pendulum.Date, end: pendulum.Date) -> str:
    return f"{start.format('MMM D')} - {end.format('MMM D')}"


def _month_label(start: pendulum.Date, end: pendulum.Date) -> str:
    return start.format("MMM YYYY")
