# SPDX-License-Identifier: MIT

import logging
import math
from typing import Optional, TypeVar, cast

import pendulum

from taskline.model.project import PROJECT_STATUS_ACTIVE, ProjectRecord
from taskline.model.task import (
    TASK_STATUS_COMPLETED,
    TASK_STATUS_IN_PROGRESS,
    TaskRecord,
)
from taskline.model.timeline_item import (
    UNASSIGNED_ID,
    UNASSIGNED_TITLE,
    TimelineItem,
    TimelineTree,
)
from taskline.time import now_local

logger = logging.getLogger(__name__)

PROJECT_DEFAULT_LENGTH_DAYS = 30
TASK_DEFAULT_LENGTH_DAYS = 7

RecordT = TypeVar("RecordT", ProjectRecord, TaskRecord)


def build_hierarchy(
    projects: list[ProjectRecord],
    tasks: list[TaskRecord],
    active_only: bool = False,
    now: Optional[pendulum.DateTime] = None,
) -> TimelineTree:
    """
    Assemble raw project and task records into a two-level timeline tree.

    Projects and the tasks under each project are ordered by start date, with
    undated records last and ties kept in input order. Tasks with an empty or
    unknown project reference end up in a synthetic "unassigned" project,
    which is appended last and only exists when there is at least one orphan.
    A missing project start becomes `now`; a missing task start falls back to
    its creation time, then `now`. Missing end dates are synthesized
    (projects +30 days, tasks +7 days).

    Args:
        projects: Project records
        tasks: Task records
        active_only: Keep only active projects and drop the unassigned bucket
        now: Reference time used when a start date is missing (defaults to now)

    Returns:
        A TimelineTree whose items are keyed by id
    """
    if now is None:
        now = now_local()

    projects = by_start_date(projects)
    tasks = by_start_date(tasks)

    known_project_ids = {project["id"] for project in projects}
    tasks_by_project: dict[str, list[TaskRecord]] = {
        project["id"]: [] for project in projects
    }
    orphans: list[TaskRecord] = []
    for task in tasks:
        project_id = task["project_id"]
        if project_id and project_id in known_project_ids:
            tasks_by_project[project_id].append(task)
        else:
            orphans.append(task)

    tree: TimelineTree = {"root_ids": [], "items": {}}

    for project in projects:
        if active_only and project["status"] != PROJECT_STATUS_ACTIVE:
            continue

        project_tasks = tasks_by_project[project["id"]]
        completed = len(
            [t for t in project_tasks if t["status"] == TASK_STATUS_COMPLETED]
        )
        progress = percent_of(completed, len(project_tasks))

        start = project["start_date"] or now
        end = project["end_date"]
        if end is None:
            end = start.add(days=PROJECT_DEFAULT_LENGTH_DAYS)

        _add_project(
            tree,
            project_id=project["id"],
            title=project["name"],
            status=project["status"],
            start=start,
            end=end,
            progress=progress,
            tasks=project_tasks,
            now=now,
        )

    if orphans and not active_only:
        _add_project(
            tree,
            project_id=UNASSIGNED_ID,
            title=UNASSIGNED_TITLE,
            status=PROJECT_STATUS_ACTIVE,
            start=now,
            end=now.add(days=PROJECT_DEFAULT_LENGTH_DAYS),
            progress=0,
            tasks=orphans,
            now=now,
        )

    logger.debug(
        "Built hierarchy: %d root items, %d tasks, %d orphans",
        len(tree["root_ids"]),
        len(tasks),
        len(orphans),
    )
    return tree


def task_progress(task: TaskRecord) -> int:
    if task["status"] == TASK_STATUS_COMPLETED:
        return 100
    if task["status"] == TASK_STATUS_IN_PROGRESS:
        return 50
    return 0


def by_start_date(records: list[RecordT]) -> list[RecordT]:
    """Stable sort on `start_date`, records without one last."""
    none_records = [r for r in records if r["start_date"] is None]
    dated_records = [r for r in records if r["start_date"] is not None]
    dated_records.sort(key=lambda r: cast(pendulum.DateTime, r["start_date"]))
    return dated_records + none_records


def iter_items(tree: TimelineTree) -> list[TimelineItem]:
    """All items of the tree, each root followed by its children."""
    result: list[TimelineItem] = []
    for root_id in tree["root_ids"]:
        root = tree["items"][root_id]
        result.append(root)
        for child_id in root["children"] or []:
            result.append(tree["items"][child_id])
    return result


def _add_project(
    tree: TimelineTree,
    project_id: str,
    title: str,
    status: str,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    progress: int,
    tasks: list[TaskRecord],
    now: pendulum.DateTime,
) -> None:
    children: list[str] = []
    for task in tasks:
        tree["items"][task["id"]] = _task_item(task, project_id, now)
        children.append(task["id"])

    tree["items"][project_id] = {
        "id": project_id,
        "title": title,
        "kind": "project",
        "start_date": start,
        "end_date": end,
        "progress": progress,
        "status": status,
        "priority": None,
        "assigned_ids": None,
        "parent_id": None,
        "children": children,
        "expanded": True,
    }
    tree["root_ids"].append(project_id)


def _task_item(
    task: TaskRecord, parent_id: str, now: pendulum.DateTime
) -> TimelineItem:
    start = task["start_date"] or task["created_at"] or now
    end = task["end_date"]
    if end is None:
        end = start.add(days=TASK_DEFAULT_LENGTH_DAYS)

    return {
        "id": task["id"],
        "title": task["title"],
        "kind": "task",
        "start_date": start,
        "end_date": end,
        "progress": task_progress(task),
        "status": task["status"],
        "priority": task["priority"],
        "assigned_ids": (
            list(task["assigned_ids"]) if task["assigned_ids"] is not None else None
        ),
        "parent_id": parent_id,
        "children": None,
        "expanded": None,
    }


def percent_of(part: int, total: int) -> int:
    if total == 0:
        return 0
    # Half-up rounding
    return int(math.floor(100 * part / total + 0.5))
