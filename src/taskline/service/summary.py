# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskline.model.project import ProjectRecord
from taskline.model.summary import CalendarSummary, GanttSummary
from taskline.model.task import (
    TASK_PRIORITY_URGENT,
    TASK_STATUS_COMPLETED,
    TaskRecord,
)
from taskline.model.timeline_item import TimelineTree
from taskline.service.calendar_day import tasks_for_day
from taskline.service.hierarchy import percent_of
from taskline.time import now_local

ON_TRACK_PROGRESS = 50


def gantt_summary(
    projects: list[ProjectRecord],
    tasks: list[TaskRecord],
    tree: TimelineTree,
    now: Optional[pendulum.DateTime] = None,
) -> GanttSummary:
    """
    Counters shown above the gantt chart.

    on_track counts root rows (including the unassigned bucket) at 50% or
    more; at_risk counts open tasks whose end date has already passed.
    """
    if now is None:
        now = now_local()

    on_track = len(
        [
            root_id
            for root_id in tree["root_ids"]
            if tree["items"][root_id]["progress"] >= ON_TRACK_PROGRESS
        ]
    )
    at_risk = len(
        [
            task
            for task in tasks
            if task["end_date"] is not None
            and task["status"] != TASK_STATUS_COMPLETED
            and task["end_date"] < now
        ]
    )

    return {
        "total_projects": len(projects),
        "total_tasks": len(tasks),
        "on_track": on_track,
        "at_risk": at_risk,
    }


def calendar_summary(
    tasks: list[TaskRecord], now: Optional[pendulum.DateTime] = None
) -> CalendarSummary:
    if now is None:
        now = now_local()

    completed = len([t for t in tasks if t["status"] == TASK_STATUS_COMPLETED])
    urgent = len(
        [
            t
            for t in tasks
            if t["priority"] == TASK_PRIORITY_URGENT
            and t["status"] != TASK_STATUS_COMPLETED
        ]
    )
    today_tasks = tasks_for_day(now.in_tz("local").date(), tasks)

    return {
        "total_tasks": len(tasks),
        "completed_tasks": completed,
        "urgent_tasks": urgent,
        "today_tasks": len(today_tasks),
        "completion_rate": percent_of(completed, len(tasks)),
    }
