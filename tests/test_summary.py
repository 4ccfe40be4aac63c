import pendulum

from taskline.service.hierarchy import build_hierarchy
from taskline.service.summary import calendar_summary, gantt_summary

NOW = pendulum.datetime(2024, 1, 15, 10, 0, tz="local")


def _project(id):
    return {
        "id": id,
        "name": id,
        "status": "active",
        "start_date": pendulum.datetime(2024, 1, 1, tz="local"),
        "end_date": None,
    }


def _task(id, project_id, status="todo", priority=None, end_day=None):
    return {
        "id": id,
        "title": id,
        "status": status,
        "priority": priority,
        "start_date": pendulum.datetime(2024, 1, 10, tz="local"),
        "end_date": (
            pendulum.datetime(2024, 1, end_day, tz="local") if end_day else None
        ),
        "due_date": None,
        "created_at": None,
        "assigned_ids": None,
        "project_id": project_id,
    }


def test_gantt_summary_counts():
    projects = [_project("p1"), _project("p2")]
    tasks = [
        _task("t1", "p1", status="completed", end_day=12),
        _task("t2", "p1", end_day=20),
        _task("t3", "p2", end_day=14),
        _task("t4", "p2", status="in-progress"),
    ]
    tree = build_hierarchy(projects, tasks, now=NOW)

    summary = gantt_summary(projects, tasks, tree, now=NOW)

    assert summary == {
        "total_projects": 2,
        "total_tasks": 4,
        "on_track": 1,
        "at_risk": 1,
    }


def test_calendar_summary_counts():
    tasks = [
        _task("t1", None, status="completed", end_day=20),
        _task("t2", None, priority="urgent", end_day=20),
        _task("t3", None, status="completed", priority="urgent", end_day=12),
    ]

    summary = calendar_summary(tasks, now=NOW)

    assert summary == {
        "total_tasks": 3,
        "completed_tasks": 2,
        "urgent_tasks": 1,
        "today_tasks": 2,
        "completion_rate": 67,
    }


def test_calendar_summary_of_nothing():
    summary = calendar_summary([], now=NOW)

    assert summary["completion_rate"] == 0
    assert summary["total_tasks"] == 0
