# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, cast

import pendulum

SECONDS_PER_DAY = 24 * 60 * 60


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return pendulum.now("local").date()


def to_local_date(value: pendulum.DateTime) -> pendulum.Date:
    """Drop the time of day after moving the timestamp into local time."""
    return value.in_tz("local").date()


def days_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    """Fractional 24 hour days from start to end, negative if end is earlier."""
    return (end.timestamp() - start.timestamp()) / SECONDS_PER_DAY


def datetime_from_str(value: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(value, tz="local"))


def datetime_from_value_optional(value: Any) -> Optional[pendulum.DateTime]:
    """
    Convert a raw YAML scalar into a pendulum.DateTime.

    PyYAML turns unquoted ISO timestamps into datetime/date objects while
    quoted ones stay strings, so all three shapes are accepted. Naive values
    are interpreted in local time.
    """
    if value is None:
        return None
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, str):
        return datetime_from_str(value)
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="local")
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz="local")
    raise ValueError(f"Unsupported timestamp value: {value!r}")
