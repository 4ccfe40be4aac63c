# SPDX-License-Identifier: MIT

from typing import Optional

COMPLETED_TASK_COLOR = "bright_black"
TODAY_STYLE = "bold black on bright_cyan"
CURRENT_HEADER_STYLE = "bold red"
STRIPE_STYLE = "on grey23"

STATUS_COLORS: dict[str, str] = {
    "completed": "green",
    "in-progress": "blue",
    "active": "blue",
    "on-hold": "yellow",
    "review": "purple",
}

PRIORITY_COLORS: dict[str, str] = {
    "urgent": "red",
    "high": "dark_orange",
    "medium": "yellow",
    "low": "green",
}


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, "grey50")


def priority_color(priority: Optional[str]) -> str:
    if priority is None:
        return "grey50"
    return PRIORITY_COLORS.get(priority, "grey50")
