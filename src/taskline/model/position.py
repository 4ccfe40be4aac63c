# SPDX-License-Identifier: MIT

from typing import TypedDict

from taskline.model.timeline_item import TimelineItem


class BarPosition(TypedDict):
    """Left offset and width, in percent of the timeline window."""

    left: float
    width: float


class ProgressOverlay(TypedDict):
    """Unfilled part of a bar, in percent of the bar itself."""

    left: float
    width: float


class PositionedRow(TypedDict):
    item: TimelineItem
    depth: int
    position: BarPosition
    overlay: ProgressOverlay
