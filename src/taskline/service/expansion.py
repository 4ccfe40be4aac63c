# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from taskline.model.timeline_item import TimelineTree


class ExpansionState:
    """
    Which project rows are expanded, keyed by project id.

    Lives only in memory. Rebuilding the hierarchy does not reset it: known
    ids keep their flag and ids seen for the first time start expanded.
    """

    def __init__(self, initial: Optional[dict[str, bool]] = None) -> None:
        self._expanded: dict[str, bool] = dict(initial or {})

    def seed(self, project_ids: Iterable[str]) -> None:
        for project_id in project_ids:
            self._expanded.setdefault(project_id, True)

    def seed_from_tree(self, tree: TimelineTree) -> None:
        self.seed(tree["root_ids"])

    def toggle(self, project_id: str) -> bool:
        expanded = not self.is_expanded(project_id)
        self._expanded[project_id] = expanded
        return expanded

    def set_expanded(self, project_id: str, expanded: bool) -> None:
        self._expanded[project_id] = expanded

    def is_expanded(self, project_id: str) -> bool:
        return self._expanded.get(project_id, True)

    def apply(self, tree: TimelineTree) -> None:
        """Write the stored flags into the project items of a freshly built tree."""
        for root_id in tree["root_ids"]:
            tree["items"][root_id]["expanded"] = self.is_expanded(root_id)

    def snapshot(self) -> dict[str, bool]:
        return dict(self._expanded)
