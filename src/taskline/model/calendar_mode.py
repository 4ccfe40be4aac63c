# SPDX-License-Identifier: MIT

from typing import Literal

CalendarMode = Literal["month", "week"]

WeekStart = Literal["sunday", "monday"]
