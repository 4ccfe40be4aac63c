# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

PROJECT_STATUS_ACTIVE = "active"


class ProjectRecord(TypedDict):
    id: str
    name: str
    status: str
    start_date: Optional[pendulum.DateTime]
    end_date: Optional[pendulum.DateTime]
