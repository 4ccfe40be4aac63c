# SPDX-License-Identifier: MIT

from typing import Literal

GranularityType = Literal["day", "week", "month"]

GRANULARITIES: tuple[GranularityType, ...] = ("day", "week", "month")
