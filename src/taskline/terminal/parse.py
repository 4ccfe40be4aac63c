# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from taskline.model.calendar_mode import WeekStart
from taskline.model.granularity_type import GRANULARITIES, GranularityType
from taskline.time import datetime_from_str


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a date option into a local start-of-day DateTime.

    Accepts YYYY-MM-DD, a day offset such as 1 or -7, and the shortcuts
    today/t, yesterday/y and tomorrow/o.
    """
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str(datetime).start_of("day")
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    if re.match(r"^-?\d+$", datetime):
        return pendulum.today("local").add(days=int(datetime))

    if datetime == "today" or datetime == "t":
        return pendulum.today("local")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday("local")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow("local")
    raise typer.BadParameter("Incorrect date format")


def parse_granularity(granularity: str) -> GranularityType:
    value = granularity.lower()
    for candidate in GRANULARITIES:
        # Single-letter shortcuts: d, w, m
        if value == candidate or value == candidate[0]:
            return candidate
    raise typer.BadParameter(
        f"Granularity must be one of {', '.join(GRANULARITIES)}, got {granularity}"
    )


def parse_week_start(week_start: str) -> WeekStart:
    value = week_start.lower()
    if value in ("sunday", "sun"):
        return "sunday"
    if value in ("monday", "mon"):
        return "monday"
    raise typer.BadParameter(f"Week start must be sunday or monday, got {week_start}")


def parse_zoom(zoom: int) -> int:
    if zoom <= 0:
        raise typer.BadParameter(f"Zoom must be a positive percentage, got {zoom}")
    return zoom
