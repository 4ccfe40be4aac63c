# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class HeaderCell(TypedDict):
    label: str
    start_date: pendulum.Date
    end_date: pendulum.Date
    is_current: bool
