# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class TimelineWindow(TypedDict):
    min_date: pendulum.DateTime
    max_date: pendulum.DateTime
    total_days: int
