import pendulum

from taskline.service.date_range import resolve_timeline_window
from taskline.service.hierarchy import build_hierarchy

NOW = pendulum.datetime(2024, 2, 1, 15, 0, tz="local")


def _project(id, start=None, end=None):
    return {
        "id": id,
        "name": id,
        "status": "active",
        "start_date": start,
        "end_date": end,
    }


def _task(id, project_id, start=None, end=None):
    return {
        "id": id,
        "title": id,
        "status": "todo",
        "priority": None,
        "start_date": start,
        "end_date": end,
        "due_date": None,
        "created_at": None,
        "assigned_ids": None,
        "project_id": project_id,
    }


def test_window_spans_all_items_with_padding():
    project = _project(
        "p1",
        start=pendulum.datetime(2024, 1, 1, tz="local"),
        end=pendulum.datetime(2024, 1, 31, tz="local"),
    )
    tree = build_hierarchy([project], [], now=NOW)

    window = resolve_timeline_window(tree, now=NOW)

    assert window["min_date"] == pendulum.datetime(2023, 12, 25, tz="local")
    assert window["max_date"] == pendulum.datetime(2024, 2, 7, tz="local")
    assert window["total_days"] == 44


def test_task_dates_widen_the_window():
    project = _project(
        "p1",
        start=pendulum.datetime(2024, 1, 10, tz="local"),
        end=pendulum.datetime(2024, 1, 20, tz="local"),
    )
    task = _task(
        "t1",
        "p1",
        start=pendulum.datetime(2024, 1, 5, tz="local"),
        end=pendulum.datetime(2024, 1, 25, tz="local"),
    )
    tree = build_hierarchy([project], [task], now=NOW)

    window = resolve_timeline_window(tree, now=NOW, padding_days=0)

    assert window["min_date"] == pendulum.datetime(2024, 1, 5, tz="local")
    assert window["max_date"] == pendulum.datetime(2024, 1, 25, tz="local")
    assert window["total_days"] == 20


def test_empty_tree_falls_back_to_start_of_today():
    window = resolve_timeline_window({"root_ids": [], "items": {}}, now=NOW)

    today = pendulum.datetime(2024, 2, 1, tz="local")
    assert window["min_date"] == today.subtract(days=7)
    assert window["max_date"] == today.add(days=7)
    assert window["total_days"] == 14


def test_total_days_is_at_least_one():
    window = resolve_timeline_window(
        {"root_ids": [], "items": {}}, now=NOW, padding_days=0
    )

    assert window["min_date"] == window["max_date"]
    assert window["total_days"] == 1


def test_partial_days_round_up():
    project = _project(
        "p1",
        start=pendulum.datetime(2024, 1, 1, tz="local"),
        end=pendulum.datetime(2024, 1, 3, 6, 0, tz="local"),
    )
    tree = build_hierarchy([project], [], now=NOW)

    window = resolve_timeline_window(tree, now=NOW, padding_days=0)

    assert window["total_days"] == 3
