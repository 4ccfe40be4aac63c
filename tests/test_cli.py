import pytest
from typer.testing import CliRunner

from taskline.terminal.app import app

runner = CliRunner()

PROJECTS_YAML = """\
projects:
  - id: web
    name: Website
    status: active
    start_date: 2024-03-01
    end_date: 2024-03-31
"""

TASKS_YAML = """\
tasks:
  - id: t1
    title: Wireframes
    status: in-progress
    priority: high
    start_date: 2024-03-10
    end_date: 2024-03-12
    project_id: web
  - id: t2
    title: Stray
    status: todo
    start_date: 2024-03-11
    end_date: 2024-03-11
"""


@pytest.fixture
def snapshot(data_dir):
    (data_dir / "projects.yaml").write_text(PROJECTS_YAML)
    (data_dir / "tasks.yaml").write_text(TASKS_YAML)
    return data_dir


def test_gantt_lists_projects_and_bucket(snapshot):
    result = runner.invoke(app, ["gantt", "-g", "month"])

    assert result.exit_code == 0, result.output
    assert "Website" in result.output
    assert "Wireframes" in result.output
    assert "Unassigned Tasks" in result.output


def test_gantt_alias_and_collapse(snapshot):
    result = runner.invoke(app, ["g", "--collapse", "web", "--no-summary"])

    assert result.exit_code == 0, result.output
    assert "Website" in result.output
    assert "Wireframes" not in result.output


def test_gantt_rejects_unknown_granularity(snapshot):
    result = runner.invoke(app, ["gantt", "-g", "fortnight"])

    assert result.exit_code != 0


def test_day_lists_tasks_covering_the_date(snapshot):
    result = runner.invoke(app, ["day", "2024-03-11"])

    assert result.exit_code == 0, result.output
    assert "Wireframes" in result.output
    assert "Stray" in result.output


def test_day_with_priority_filter(snapshot):
    result = runner.invoke(app, ["d", "2024-03-11", "--priority", "high"])

    assert result.exit_code == 0, result.output
    assert "Wireframes" in result.output
    assert "Stray" not in result.output


def test_cal_month_shows_month_title(snapshot):
    result = runner.invoke(app, ["cm", "-d", "2024-03-01"])

    assert result.exit_code == 0, result.output
    assert "March 2024" in result.output


def test_cal_month_steps_forward(snapshot):
    result = runner.invoke(app, ["cal-month", "-d", "2024-03-15", "-n", "1"])

    assert result.exit_code == 0, result.output
    assert "April 2024" in result.output


def test_cal_week_runs(snapshot):
    result = runner.invoke(app, ["--no-header", "cw", "-d", "2024-03-11"])

    assert result.exit_code == 0, result.output
    assert "Mar 10 - Mar 16, 2024" in result.output
    assert "taskline" not in result.output


def test_summary(snapshot):
    result = runner.invoke(app, ["summary"])

    assert result.exit_code == 0, result.output
    assert "Completion rate" in result.output


def test_config_view(snapshot):
    result = runner.invoke(app, ["config", "view"])

    assert result.exit_code == 0, result.output
    assert "default_granularity" in result.output


def test_malformed_snapshot_exits_with_error(data_dir):
    (data_dir / "tasks.yaml").write_text("not: tasks\n")

    result = runner.invoke(app, ["gantt"])

    assert result.exit_code == 1
    assert "Could not read the snapshot" in result.output
