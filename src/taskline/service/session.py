# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from taskline.model.calendar_day import DayDetail
from taskline.model.calendar_mode import CalendarMode, WeekStart
from taskline.model.granularity_type import GRANULARITIES, GranularityType
from taskline.model.project import ProjectRecord
from taskline.model.render import (
    RenderOptions,
    TimelineRender,
    default_render_options,
)
from taskline.model.task import TaskRecord
from taskline.model.timeline_item import TimelineTree
from taskline.model.timeline_window import TimelineWindow
from taskline.service.calendar_day import day_detail, shift_anchor
from taskline.service.date_range import (
    WINDOW_PADDING_DAYS,
    resolve_timeline_window,
)
from taskline.service.expansion import ExpansionState
from taskline.service.hierarchy import build_hierarchy
from taskline.service.render import layout_timeline
from taskline.service.zoom import DEFAULT_ZOOM_PERCENT, ZoomController
from taskline.time import now_local

logger = logging.getLogger(__name__)


class TimelineSession:
    """
    Presentation-side owner of the timeline view state.

    Holds the current snapshot together with the expansion map, the zoom and
    the active filters. Every refresh fully replaces the snapshot. The
    hierarchy and window are memoized per snapshot and active-only flag, so
    zoom, granularity, expansion and filter changes skip rebuilding them,
    and dates filled in from `now` keep the value of the first build.
    """

    def __init__(
        self,
        granularity: GranularityType = "week",
        zoom_percent: int = DEFAULT_ZOOM_PERCENT,
        week_starts_on: WeekStart = "sunday",
        padding_days: int = WINDOW_PADDING_DAYS,
    ) -> None:
        self.expansion = ExpansionState()
        self.zoom = ZoomController(zoom_percent)
        self.week_starts_on: WeekStart = week_starts_on
        self.padding_days = padding_days
        self._options: RenderOptions = default_render_options()
        self._options["granularity"] = granularity
        self._projects: list[ProjectRecord] = []
        self._tasks: list[TaskRecord] = []
        self._memo: dict[bool, tuple[TimelineTree, TimelineWindow]] = {}

    @property
    def options(self) -> RenderOptions:
        options = self._options.copy()
        options["zoom_percent"] = self.zoom.percent
        return options

    @property
    def projects(self) -> list[ProjectRecord]:
        return self._projects

    @property
    def tasks(self) -> list[TaskRecord]:
        return self._tasks

    def tree(self, now: Optional[pendulum.DateTime] = None) -> TimelineTree:
        """The memoized hierarchy for the current snapshot and active-only flag."""
        tree, _ = self._tree_and_window(now or now_local())
        return tree

    def refresh(
        self,
        projects: list[ProjectRecord],
        tasks: list[TaskRecord],
        now: Optional[pendulum.DateTime] = None,
    ) -> None:
        """Replace the snapshot; expansion flags survive by project id."""
        self._projects = list(projects)
        self._tasks = list(tasks)
        self._memo.clear()
        tree, _ = self._tree_and_window(now or now_local())
        self.expansion.seed_from_tree(tree)
        logger.debug(
            "Snapshot refreshed: %d projects, %d tasks", len(projects), len(tasks)
        )

    def toggle_expansion(self, project_id: str) -> bool:
        return self.expansion.toggle(project_id)

    def zoom_in(self) -> int:
        return self.zoom.zoom_in()

    def zoom_out(self) -> int:
        return self.zoom.zoom_out()

    def set_granularity(self, granularity: GranularityType) -> None:
        if granularity not in GRANULARITIES:
            raise ValueError(f"Unsupported granularity: {granularity}")
        self._options["granularity"] = granularity

    def set_active_only(self, active_only: bool) -> None:
        self._options["active_only"] = active_only

    def set_filters(
        self,
        status_filter: Optional[str] = None,
        priority_filter: Optional[str] = None,
    ) -> None:
        if status_filter is not None:
            self._options["status_filter"] = status_filter
        if priority_filter is not None:
            self._options["priority_filter"] = priority_filter

    def set_calendar(
        self,
        mode: Optional[CalendarMode] = None,
        anchor: Optional[pendulum.DateTime] = None,
    ) -> None:
        if mode is not None:
            if mode not in ("month", "week"):
                raise ValueError(f"Unsupported calendar mode: {mode}")
            self._options["calendar_mode"] = mode
        if anchor is not None:
            self._options["calendar_anchor"] = anchor

    def navigate(self, steps: int, now: Optional[pendulum.DateTime] = None) -> None:
        """Move the calendar by whole months or weeks."""
        current = self._options["calendar_anchor"] or now or now_local()
        date = shift_anchor(
            current.in_tz("local").date(), self._options["calendar_mode"], steps
        )
        self._options["calendar_anchor"] = pendulum.datetime(
            date.year, date.month, date.day, tz="local"
        )

    def render(self, now: Optional[pendulum.DateTime] = None) -> TimelineRender:
        if now is None:
            now = now_local()
        tree, window = self._tree_and_window(now)
        return layout_timeline(
            tree,
            window,
            self._tasks,
            self.options,
            self.expansion,
            now,
            self.week_starts_on,
        )

    def day_click(self, day: pendulum.Date) -> DayDetail:
        return day_detail(
            day,
            self._tasks,
            status_filter=self._options["status_filter"],
            priority_filter=self._options["priority_filter"],
        )

    def _tree_and_window(
        self, now: pendulum.DateTime
    ) -> tuple[TimelineTree, TimelineWindow]:
        active_only = self._options["active_only"]
        if active_only not in self._memo:
            tree = build_hierarchy(
                self._projects, self._tasks, active_only=active_only, now=now
            )
            window = resolve_timeline_window(
                tree, now=now, padding_days=self.padding_days
            )
            self._memo[active_only] = (tree, window)
        return self._memo[active_only]
