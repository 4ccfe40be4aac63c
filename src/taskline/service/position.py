# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum

from taskline.model.position import BarPosition, ProgressOverlay
from taskline.model.timeline_window import TimelineWindow
from taskline.time import days_between

MIN_BAR_WIDTH_PERCENT = 1.0


def calculate_position(
    start: Optional[pendulum.DateTime],
    end: Optional[pendulum.DateTime],
    window: TimelineWindow,
) -> BarPosition:
    """
    Map a date range onto the timeline window as percentages.

    Offsets are whole days (floored) from the window start. The width is
    floored at 1% so empty or inverted ranges stay visible, and the bar
    never ends past 100%. Zoom never enters this computation.

    Args:
        start: Range start; without it the bar is zero-width at 0%
        end: Range end; without it the bar spans one day
        window: The resolved timeline window

    Returns:
        Left offset and width in percent of the window
    """
    if start is None:
        return {"left": 0.0, "width": 0.0}

    total_days = window["total_days"]
    start_offset = math.floor(days_between(window["min_date"], start))
    if end is not None:
        end_offset = math.floor(days_between(window["min_date"], end))
    else:
        end_offset = start_offset + 1

    left = max(0.0, start_offset / total_days * 100)
    width = max(MIN_BAR_WIDTH_PERCENT, (end_offset - start_offset) / total_days * 100)
    # A floored bar at the far edge moves left rather than overflowing
    left = max(0.0, min(left, 100.0 - width))
    return {"left": left, "width": width}


def calculate_progress_overlay(progress: int) -> ProgressOverlay:
    """The unfilled remainder of a bar, anchored at the completed point."""
    progress = min(100, max(0, progress))
    return {"left": float(progress), "width": float(100 - progress)}


def format_percent(value: float) -> str:
    return f"{value:g}%"


def css_style(position: BarPosition | ProgressOverlay) -> dict[str, str]:
    return {
        "left": format_percent(position["left"]),
        "width": format_percent(position["width"]),
    }
