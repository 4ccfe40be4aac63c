# SPDX-License-Identifier: MIT

"""Per-invocation view settings kept in context variables."""

from contextvars import ContextVar

from taskline.model.calendar_mode import WeekStart

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)
_week_starts_on_var: ContextVar[WeekStart] = ContextVar(
    "week_starts_on", default="sunday"
)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Whether reports print the application header above their output."""
    return _show_header_var.get()


def set_week_starts_on(value: WeekStart) -> None:
    _week_starts_on_var.set(value)


def get_week_starts_on() -> WeekStart:
    return _week_starts_on_var.get()
