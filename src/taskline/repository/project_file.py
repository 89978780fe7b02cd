# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from taskline import time
from taskline.model.project import Project
from taskline.model.task import TASK_PRIORITIES, TASK_STATUSES, Task


class ProjectFileError(ValueError):
    """Raised when a project file is structurally malformed."""


class ProjectFileRepository:
    """Read-only access to a project and its tasks stored in a YAML file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._project: Optional[Project] = None
        self._tasks: Optional[list[Task]] = None

    @property
    def project(self) -> Project:
        if self._project is None:
            self.__load_data()
        if self._project is None:
            raise ValueError()
        return self._project

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def get_project(self) -> Project:
        return self.project

    def get_all_tasks(self) -> list[Task]:
        return list(self.tasks)

    def __load_data(self) -> None:
        try:
            raw = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        except (YAMLError, ValueError) as e:
            raise ProjectFileError(f"Invalid project file {self.path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ProjectFileError(
                f"Invalid project file {self.path}: expected a mapping at the top level"
            )

        raw_project = raw.get("project") or {}
        if not isinstance(raw_project, dict):
            raise ProjectFileError(
                f"Invalid project file {self.path}: 'project' must be a mapping"
            )

        raw_tasks = raw.get("tasks") or []
        if not isinstance(raw_tasks, list):
            raise ProjectFileError(
                f"Invalid project file {self.path}: 'tasks' must be a list"
            )

        project = self.__convert_project_for_deserialization(raw_project)
        tasks: list[Task] = []
        seen_ids: set[str] = set()
        for position, raw_task in enumerate(raw_tasks, start=1):
            if not isinstance(raw_task, dict):
                raise ProjectFileError(
                    f"Invalid project file {self.path}: task #{position} must be a mapping"
                )
            task = self.__convert_task_for_deserialization(raw_task, position)
            if task["id"] in seen_ids:
                raise ProjectFileError(
                    f"Invalid project file {self.path}: duplicate task id '{task['id']}'"
                )
            seen_ids.add(task["id"])
            tasks.append(task)

        self._project = project
        self._tasks = tasks

    def __convert_project_for_deserialization(
        self, project: dict[str, Any]
    ) -> Project:
        name = project.get("name")
        return {
            "name": None if name is None else str(name),
            "start_date": time.date_from_value_optional(project.get("start_date")),
            "end_date": time.date_from_value_optional(project.get("end_date")),
        }

    def __convert_task_for_deserialization(
        self, task: dict[str, Any], position: int
    ) -> Task:
        task_id = task.get("id")
        if task_id is None or str(task_id) == "":
            raise ProjectFileError(
                f"Invalid project file {self.path}: task #{position} has no id"
            )
        task_id = str(task_id)

        status = task.get("status") or "TODO"
        if status not in TASK_STATUSES:
            raise ProjectFileError(
                f"Invalid project file {self.path}: task '{task_id}' has unknown status '{status}'"
            )
        priority = task.get("priority") or "MEDIUM"
        if priority not in TASK_PRIORITIES:
            raise ProjectFileError(
                f"Invalid project file {self.path}: task '{task_id}' has unknown priority '{priority}'"
            )

        parent_id = task.get("parent_id")
        assignee = task.get("assignee")
        estimated_hours = task.get("estimated_hours")
        if estimated_hours is not None:
            try:
                estimated_hours = float(estimated_hours)
            except (TypeError, ValueError) as e:
                raise ProjectFileError(
                    f"Invalid project file {self.path}: task '{task_id}' has invalid estimated_hours"
                ) from e

        try:
            start_date = time.date_from_value_optional(task.get("start_date"))
            due_date = time.date_from_value_optional(task.get("due_date"))
        except time.InvalidDateError as e:
            raise time.InvalidDateError(f"Task '{task_id}': {e}") from e

        return cast(
            Task,
            {
                "id": task_id,
                "title": str(task.get("title") or ""),
                "status": status,
                "priority": priority,
                "start_date": start_date,
                "due_date": due_date,
                "parent_id": None if parent_id is None else str(parent_id),
                "estimated_hours": estimated_hours,
                "assignee": None if assignee is None else str(assignee),
            },
        )
