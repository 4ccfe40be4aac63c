# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from taskline.model.task import TaskRecord


class CalendarDay(TypedDict):
    date: pendulum.Date
    tasks_in_range: list[TaskRecord]
    in_period: bool
    is_today: bool


class DayDetail(TypedDict):
    date: pendulum.Date
    tasks: list[TaskRecord]
