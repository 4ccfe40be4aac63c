# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskline.model.calendar_mode import WeekStart
from taskline.model.position import PositionedRow
from taskline.model.project import ProjectRecord
from taskline.model.render import RenderOptions, TimelineRender
from taskline.model.task import TaskRecord
from taskline.model.timeline_item import TimelineItem, TimelineTree
from taskline.model.timeline_window import TimelineWindow
from taskline.service.calendar_day import build_calendar_days
from taskline.service.date_range import (
    WINDOW_PADDING_DAYS,
    resolve_timeline_window,
)
from taskline.service.expansion import ExpansionState
from taskline.service.hierarchy import build_hierarchy
from taskline.service.position import (
    calculate_position,
    calculate_progress_overlay,
)
from taskline.service.timeline_header import generate_header_cells
from taskline.service.zoom import clamp_zoom
from taskline.time import now_local


def render_timeline(
    projects: list[ProjectRecord],
    tasks: list[TaskRecord],
    options: RenderOptions,
    expansion: ExpansionState,
    now: Optional[pendulum.DateTime] = None,
    week_starts_on: WeekStart = "sunday",
    padding_days: int = WINDOW_PADDING_DAYS,
) -> TimelineRender:
    """
    Run the full layout pipeline over one snapshot of projects and tasks.

    The result depends only on the arguments. The expansion map is seeded
    with any new project ids (expanded by default) and its flags are written
    into the rebuilt tree; nothing else is mutated.

    Args:
        projects: Project records from the store
        tasks: Task records from the store
        options: Granularity, zoom, filters and calendar period
        expansion: Expanded flags per project id
        now: Reference time (defaults to now)
        week_starts_on: First column of the calendar grid
        padding_days: Days of padding around the timeline window

    Returns:
        Header cells, positioned visible rows and calendar day buckets
    """
    if now is None:
        now = now_local()

    tree = build_hierarchy(projects, tasks, active_only=options["active_only"], now=now)
    window = resolve_timeline_window(tree, now=now, padding_days=padding_days)
    return layout_timeline(tree, window, tasks, options, expansion, now, week_starts_on)


def layout_timeline(
    tree: TimelineTree,
    window: TimelineWindow,
    tasks: list[TaskRecord],
    options: RenderOptions,
    expansion: ExpansionState,
    now: pendulum.DateTime,
    week_starts_on: WeekStart = "sunday",
) -> TimelineRender:
    """
    The part of the pipeline that runs after the hierarchy and window exist.

    Split out so callers that memoize the tree and window only redo the work
    that depends on granularity, zoom, expansion and filters.
    """
    expansion.seed_from_tree(tree)
    expansion.apply(tree)

    today = now.in_tz("local").date()
    anchor = (options["calendar_anchor"] or now).in_tz("local").date()

    return {
        "window": window,
        "header_cells": generate_header_cells(
            window, options["granularity"], today=today
        ),
        "rows": visible_rows(tree, window),
        "zoom_percent": clamp_zoom(options["zoom_percent"]),
        "calendar_days": build_calendar_days(
            anchor,
            options["calendar_mode"],
            tasks,
            status_filter=options["status_filter"],
            priority_filter=options["priority_filter"],
            week_starts_on=week_starts_on,
            today=today,
        ),
    }


def visible_rows(tree: TimelineTree, window: TimelineWindow) -> list[PositionedRow]:
    """Project rows in order, each followed by its task rows when expanded."""
    rows: list[PositionedRow] = []
    for root_id in tree["root_ids"]:
        project = tree["items"][root_id]
        rows.append(_positioned_row(project, 0, window))
        if not project["expanded"]:
            continue
        for child_id in project["children"] or []:
            rows.append(_positioned_row(tree["items"][child_id], 1, window))
    return rows


def _positioned_row(
    item: TimelineItem, depth: int, window: TimelineWindow
) -> PositionedRow:
    return {
        "item": item,
        "depth": depth,
        "position": calculate_position(item["start_date"], item["end_date"], window),
        "overlay": calculate_progress_overlay(item["progress"]),
    }
