# SPDX-License-Identifier: MIT

import logging
import math
from typing import Optional

import pendulum

from taskline.model.timeline_item import TimelineItem, TimelineTree
from taskline.model.timeline_window import TimelineWindow
from taskline.time import days_between, now_local

logger = logging.getLogger(__name__)

WINDOW_PADDING_DAYS = 7


def resolve_timeline_window(
    tree: TimelineTree,
    now: Optional[pendulum.DateTime] = None,
    padding_days: int = WINDOW_PADDING_DAYS,
) -> TimelineWindow:
    """
    Find the global date extent of a timeline tree and pad it on both sides.

    Absent dates are skipped. When the tree carries no dates at all the window
    collapses onto the start of today before padding.

    Args:
        tree: The timeline tree to scan
        now: Reference time for the empty-tree fallback (defaults to now)
        padding_days: Days added before the earliest and after the latest date

    Returns:
        The padded window; total_days is never smaller than 1
    """
    min_date: Optional[pendulum.DateTime] = None
    max_date: Optional[pendulum.DateTime] = None

    for item in _walk(tree, tree["root_ids"]):
        for value in (item["start_date"], item["end_date"]):
            if value is None:
                continue
            if min_date is None or value < min_date:
                min_date = value
            if max_date is None or value > max_date:
                max_date = value

    if min_date is None or max_date is None:
        today = (now or now_local()).in_tz("local").start_of("day")
        min_date = today
        max_date = today

    min_date = min_date.subtract(days=padding_days)
    max_date = max_date.add(days=padding_days)
    total_days = max(1, math.ceil(days_between(min_date, max_date)))

    logger.debug(
        "Resolved timeline window %s .. %s (%d days)",
        min_date.to_date_string(),
        max_date.to_date_string(),
        total_days,
    )
    return {"min_date": min_date, "max_date": max_date, "total_days": total_days}


def _walk(tree: TimelineTree, item_ids: list[str]) -> list[TimelineItem]:
    items: list[TimelineItem] = []
    for item_id in item_ids:
        item = tree["items"][item_id]
        items.append(item)
        if item["children"]:
            items.extend(_walk(tree, item["children"]))
    return items
