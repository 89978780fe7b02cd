# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

import pendulum

TaskId: TypeAlias = str

TaskStatus = Literal["TODO", "IN_PROGRESS", "IN_REVIEW", "DONE", "BLOCKED"]
TaskPriority = Literal["LOW", "MEDIUM", "HIGH", "CRITICAL"]

TASK_STATUSES: tuple[TaskStatus, ...] = (
    "TODO",
    "IN_PROGRESS",
    "IN_REVIEW",
    "DONE",
    "BLOCKED",
)
TASK_PRIORITIES: tuple[TaskPriority, ...] = ("LOW", "MEDIUM", "HIGH", "CRITICAL")


class Task(TypedDict):
    id: TaskId
    title: str
    status: TaskStatus
    priority: TaskPriority
    start_date: Optional[pendulum.Date]
    due_date: Optional[pendulum.Date]
    parent_id: Optional[TaskId]
    estimated_hours: Optional[float]
    assignee: Optional[str]
