# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

ItemKind = Literal["project", "task"]

UNASSIGNED_ID = "unassigned"
UNASSIGNED_TITLE = "Unassigned Tasks"


class TimelineItem(TypedDict):
    id: str
    title: str
    kind: ItemKind
    start_date: Optional[pendulum.DateTime]
    end_date: Optional[pendulum.DateTime]
    progress: int
    status: str
    priority: Optional[str]
    assigned_ids: Optional[list[str]]
    parent_id: Optional[str]
    # Ordered child ids; None for tasks
    children: Optional[list[str]]
    expanded: Optional[bool]


class TimelineTree(TypedDict):
    root_ids: list[str]
    items: dict[str, TimelineItem]
