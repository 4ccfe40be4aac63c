# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskline.model.calendar_day import CalendarDay
from taskline.model.calendar_mode import CalendarMode
from taskline.model.granularity_type import GranularityType
from taskline.model.header_cell import HeaderCell
from taskline.model.position import PositionedRow
from taskline.model.timeline_window import TimelineWindow

FILTER_ALL = "all"


class RenderOptions(TypedDict):
    granularity: GranularityType
    zoom_percent: int
    active_only: bool
    status_filter: str
    priority_filter: str
    calendar_mode: CalendarMode
    calendar_anchor: Optional[pendulum.DateTime]


class TimelineRender(TypedDict):
    window: TimelineWindow
    header_cells: list[HeaderCell]
    rows: list[PositionedRow]
    zoom_percent: int
    calendar_days: list[CalendarDay]


def default_render_options() -> RenderOptions:
    return {
        "granularity": "week",
        "zoom_percent": 100,
        "active_only": False,
        "status_filter": FILTER_ALL,
        "priority_filter": FILTER_ALL,
        "calendar_mode": "month",
        "calendar_anchor": None,
    }
