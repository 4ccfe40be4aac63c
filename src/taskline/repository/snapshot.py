# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from taskline import configuration
from taskline.model.project import ProjectRecord
from taskline.model.task import TaskRecord
from taskline.time import datetime_from_value_optional

logger = logging.getLogger(__name__)


class SnapshotRepository:
    """
    Read-only view of the project and task records kept by the team store.

    Each load is a complete snapshot; nothing is merged with earlier loads.
    """

    def __init__(self) -> None:
        self._projects: Optional[list[ProjectRecord]] = None
        self._tasks: Optional[list[TaskRecord]] = None

    @property
    def projects(self) -> list[ProjectRecord]:
        if self._projects is None:
            self.__load_data()
        if self._projects is None:
            raise ValueError()
        return self._projects

    @property
    def tasks(self) -> list[TaskRecord]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        raw_projects = self.__load_list(configuration.DATA_PROJECTS_PATH, "projects")
        raw_tasks = self.__load_list(configuration.DATA_TASKS_PATH, "tasks")

        self._projects = [
            self.__convert_project_for_deserialization(p) for p in raw_projects
        ]
        self._tasks = [self.__convert_task_for_deserialization(t) for t in raw_tasks]
        logger.info(
            "Loaded snapshot from %s: %d projects, %d tasks",
            configuration.DATA_PATH,
            len(self._projects),
            len(self._tasks),
        )

    def __load_list(self, file_path: Path, key: str) -> list[dict[str, Any]]:
        if not file_path.is_file():
            logger.debug("No %s file at %s", key, file_path)
            return []

        data = load(file_path.read_text(), Loader=Loader)
        if data is None:
            return []
        if not isinstance(data, dict) or key not in data:
            raise ValueError(f"{file_path} must be a mapping with a '{key}' list")

        records = data[key] or []
        if not isinstance(records, list):
            raise ValueError(f"'{key}' in {file_path} must be a list")
        for record in records:
            if not isinstance(record, dict) or "id" not in record:
                raise ValueError(f"Every entry of '{key}' in {file_path} needs an id")
        return records

    def __convert_project_for_deserialization(
        self, raw_project: dict[str, Any]
    ) -> ProjectRecord:
        return {
            "id": str(raw_project["id"]),
            "name": raw_project.get("name") or "Unknown Project",
            "status": raw_project.get("status") or "active",
            "start_date": datetime_from_value_optional(raw_project.get("start_date")),
            "end_date": datetime_from_value_optional(raw_project.get("end_date")),
        }

    def __convert_task_for_deserialization(
        self, raw_task: dict[str, Any]
    ) -> TaskRecord:
        assigned_ids = raw_task.get("assigned_ids")
        if isinstance(assigned_ids, str):
            assigned_ids = [assigned_ids]
        project_id = raw_task.get("project_id")

        return {
            "id": str(raw_task["id"]),
            "title": raw_task.get("title") or "Untitled",
            "status": raw_task.get("status") or "todo",
            "priority": raw_task.get("priority"),
            "start_date": datetime_from_value_optional(raw_task.get("start_date")),
            "end_date": datetime_from_value_optional(raw_task.get("end_date")),
            "due_date": datetime_from_value_optional(raw_task.get("due_date")),
            "created_at": datetime_from_value_optional(raw_task.get("created_at")),
            "assigned_ids": (
                [str(a) for a in assigned_ids if a] if assigned_ids else None
            ),
            "project_id": str(project_id) if project_id else None,
        }

    def get_all_projects(self) -> list[ProjectRecord]:
        return list(self.projects)

    def get_all_tasks(self) -> list[TaskRecord]:
        return list(self.tasks)

    def reload(self) -> None:
        self._projects = None
        self._tasks = None


SNAPSHOT_REPO = SnapshotRepository()
