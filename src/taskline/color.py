# SPDX-License-Identifier: MIT

from taskline.model.task import TaskPriority, TaskStatus

TASK_STATUS_COLORS: dict[TaskStatus, str] = {
    "TODO": "#6B7280",
    "IN_PROGRESS": "#3B82F6",
    "IN_REVIEW": "#F59E0B",
    "DONE": "#10B981",
    "BLOCKED": "#EF4444",
}

TASK_PRIORITY_COLORS: dict[TaskPriority, str] = {
    "LOW": "#10B981",
    "MEDIUM": "#F59E0B",
    "HIGH": "#F97316",
    "CRITICAL": "#EF4444",
}

UNKNOWN_STATUS_COLOR = "white"
MILESTONE_COLOR = "bold green"
WEEKEND_BACKGROUND = "on grey23"
DETAIL_COLOR = "bright_black"


def get_status_color(status: str) -> str:
    return TASK_STATUS_COLORS.get(status, UNKNOWN_STATUS_COLOR)  # type: ignore[call-overload]


def get_priority_color(priority: str) -> str:
    return TASK_PRIORITY_COLORS.get(priority, UNKNOWN_STATUS_COLOR)  # type: ignore[call-overload]
