# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskline.model.calendar_day import CalendarDay, DayDetail
from taskline.model.calendar_mode import CalendarMode, WeekStart
from taskline.model.render import FILTER_ALL
from taskline.model.task import TaskRecord
from taskline.time import to_local_date, today_local

# date.weekday(): Monday=0 ... Sunday=6
_WEEK_START_WEEKDAY: dict[str, int] = {"monday": 0, "sunday": 6}


def tasks_for_day(
    day: pendulum.Date,
    tasks: list[TaskRecord],
    status_filter: str = FILTER_ALL,
    priority_filter: str = FILTER_ALL,
) -> list[TaskRecord]:
    """
    Filter tasks to those whose date range covers the given day.

    The comparison is date-only in local time and inclusive on both ends. A
    missing bound falls back to the due date, then to the other bound; tasks
    without any date never match. Status and priority filters are exact
    matches unless set to "all".

    Args:
        day: The calendar day to test
        tasks: All tasks, in display order
        status_filter: Required status, or "all"
        priority_filter: Required priority, or "all"

    Returns:
        Matching tasks in input order
    """
    filtered_tasks = []
    for task in tasks:
        task_range = _task_date_range(task)
        if task_range is None:
            continue

        start_only, end_only = task_range
        if not start_only <= day <= end_only:
            continue

        if status_filter != FILTER_ALL and task["status"] != status_filter:
            continue
        if priority_filter != FILTER_ALL and task["priority"] != priority_filter:
            continue

        filtered_tasks.append(task)

    return filtered_tasks


def day_detail(
    day: pendulum.Date,
    tasks: list[TaskRecord],
    status_filter: str = FILTER_ALL,
    priority_filter: str = FILTER_ALL,
) -> DayDetail:
    """Result of clicking a day: always returned, even when no task matches."""
    return {
        "date": day,
        "tasks": tasks_for_day(day, tasks, status_filter, priority_filter),
    }


def week_start_of(
    day: pendulum.Date, week_starts_on: WeekStart = "sunday"
) -> pendulum.Date:
    offset = (day.weekday() - _WEEK_START_WEEKDAY[week_starts_on]) % 7
    return day.subtract(days=offset)


def month_grid_dates(
    anchor: pendulum.Date, week_starts_on: WeekStart = "sunday"
) -> list[pendulum.Date]:
    """
    Dates shown by the month view: whole weeks from the week containing the
    first of the month through the week containing the last of the month.
    """
    month_start = anchor.start_of("month")
    month_end = anchor.end_of("month")

    current = week_start_of(month_start, week_starts_on)
    last = week_start_of(month_end, week_starts_on).add(days=6)

    dates = []
    while current <= last:
        dates.append(current)
        current = current.add(days=1)
    return dates


def week_dates(
    anchor: pendulum.Date, week_starts_on: WeekStart = "sunday"
) -> list[pendulum.Date]:
    first = week_start_of(anchor, week_starts_on)
    return [first.add(days=i) for i in range(7)]


def shift_anchor(
    anchor: pendulum.Date, mode: CalendarMode, steps: int
) -> pendulum.Date:
    """Move the calendar anchor by whole months or weeks (negative steps go back)."""
    if mode == "month":
        return anchor.start_of("month").add(months=steps)
    if mode == "week":
        return anchor.add(weeks=steps)
    raise ValueError(f"Unsupported calendar mode: {mode}")


def period_dates(
    anchor: pendulum.Date, mode: CalendarMode, week_starts_on: WeekStart = "sunday"
) -> list[pendulum.Date]:
    if mode == "month":
        return month_grid_dates(anchor, week_starts_on)
    if mode == "week":
        return week_dates(anchor, week_starts_on)
    raise ValueError(f"Unsupported calendar mode: {mode}")


def build_calendar_days(
    anchor: pendulum.Date,
    mode: CalendarMode,
    tasks: list[TaskRecord],
    status_filter: str = FILTER_ALL,
    priority_filter: str = FILTER_ALL,
    week_starts_on: WeekStart = "sunday",
    today: Optional[pendulum.Date] = None,
) -> list[CalendarDay]:
    """
    Bucket tasks into every visible day of a month or week view.

    Args:
        anchor: Any date inside the month or week to show
        mode: "month" or "week"
        tasks: All tasks
        status_filter: Required status, or "all"
        priority_filter: Required priority, or "all"
        week_starts_on: First column of the grid
        today: The date flagged as today (defaults to today, local time)

    Returns:
        One CalendarDay per visible date, in grid order
    """
    if today is None:
        today = today_local()

    days: list[CalendarDay] = []
    for date in period_dates(anchor, mode, week_starts_on):
        days.append(
            {
                "date": date,
                "tasks_in_range": tasks_for_day(
                    date, tasks, status_filter, priority_filter
                ),
                "in_period": mode == "week" or date.month == anchor.month,
                "is_today": date == today,
            }
        )
    return days


def _task_date_range(
    task: TaskRecord,
) -> Optional[tuple[pendulum.Date, pendulum.Date]]:
    start = task["start_date"] or task["due_date"] or task["end_date"]
    end = task["end_date"] or task["due_date"] or task["start_date"]
    if start is None or end is None:
        return None
    return to_local_date(start), to_local_date(end)
