import pendulum
from rich.console import Console

from taskline.view.views.calendar import render_day_cell, weekday_names
from taskline.view.views.gantt import bar_columns, cell_columns


def _task(id, priority=None, status="todo"):
    return {
        "id": id,
        "title": f"Task {id}",
        "status": status,
        "priority": priority,
        "start_date": None,
        "end_date": None,
        "due_date": None,
        "created_at": None,
        "assigned_ids": None,
        "project_id": None,
    }


def test_bar_columns_scale_percentages_to_width():
    assert bar_columns({"left": 10.0, "width": 20.0}, 100) == (10, 20)
    assert bar_columns({"left": 10.0, "width": 20.0}, 50) == (5, 10)


def test_bar_columns_keep_bars_visible_and_inside():
    assert bar_columns({"left": 0.0, "width": 0.0}, 40) == (0, 0)
    assert bar_columns({"left": 50.0, "width": 1.0}, 20) == (10, 1)
    assert bar_columns({"left": 99.0, "width": 10.0}, 40) == (39, 1)


def test_cell_columns_partition_the_timeline():
    start = pendulum.datetime(2024, 1, 1, tz="local")
    window = {"min_date": start, "max_date": start.add(days=14), "total_days": 14}
    cells = [
        {
            "label": "a",
            "start_date": pendulum.date(2024, 1, 1),
            "end_date": pendulum.date(2024, 1, 7),
            "is_current": False,
        },
        {
            "label": "b",
            "start_date": pendulum.date(2024, 1, 8),
            "end_date": pendulum.date(2024, 1, 14),
            "is_current": True,
        },
    ]

    assert cell_columns(cells, window, 28) == [(0, 14), (14, 28)]


def test_weekday_names_follow_week_start():
    assert weekday_names("sunday")[0] == "Sun"
    assert weekday_names("monday")[0] == "Mon"
    assert len(weekday_names("sunday")) == 7


def test_day_cell_shows_three_tasks_and_overflow():
    day = {
        "date": pendulum.date(2024, 3, 11),
        "tasks_in_range": [_task(str(i), priority="urgent") for i in range(5)],
        "in_period": True,
        "is_today": False,
    }

    cell = render_day_cell(day, cell_width=20)

    assert cell.plain.splitlines() == [
        "11",
        "● Task 0",
        "● Task 1",
        "● Task 2",
        "  +2 more",
    ]


def test_day_cell_truncates_long_titles():
    task = _task("x")
    task["title"] = "A very long task title indeed"
    day = {
        "date": pendulum.date(2024, 3, 1),
        "tasks_in_range": [task],
        "in_period": True,
        "is_today": True,
    }

    cell = render_day_cell(day, cell_width=12)

    lines = cell.plain.splitlines()
    assert lines[0].strip() == "1"
    assert lines[1] == "● A very ..."

    console = Console(width=40, record=True)
    console.print(cell)
    assert "A very ..." in console.export_text()
