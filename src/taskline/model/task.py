# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

TASK_STATUS_COMPLETED = "completed"
TASK_STATUS_IN_PROGRESS = "in-progress"
TASK_PRIORITY_URGENT = "urgent"


class TaskRecord(TypedDict):
    id: str
    title: str
    status: str
    priority: Optional[str]
    start_date: Optional[pendulum.DateTime]
    end_date: Optional[pendulum.DateTime]
    due_date: Optional[pendulum.DateTime]
    created_at: Optional[pendulum.DateTime]
    assigned_ids: Optional[list[str]]
    project_id: Optional[str]
