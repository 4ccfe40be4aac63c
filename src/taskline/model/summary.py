# SPDX-License-Identifier: MIT

from typing import TypedDict


class GanttSummary(TypedDict):
    total_projects: int
    total_tasks: int
    on_track: int
    at_risk: int


class CalendarSummary(TypedDict):
    total_tasks: int
    completed_tasks: int
    urgent_tasks: int
    today_tasks: int
    completion_rate: int
