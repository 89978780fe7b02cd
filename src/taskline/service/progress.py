# SPDX-License-Identifier: MIT

from typing import Iterable, Mapping, Optional

from taskline.model.layout import ProgressSummary
from taskline.model.task import TASK_STATUSES, Task, TaskStatus

DEFAULT_PROGRESS_BY_STATUS: Mapping[str, int] = {
    "TODO": 0,
    "IN_PROGRESS": 50,
    "IN_REVIEW": 75,
    "DONE": 100,
    "BLOCKED": 25,
}


def estimate_progress(
    status: str, policy: Optional[Mapping[str, int]] = None
) -> int:
    """
    Coarse completion percentage for a task status.

    Args:
        status: The task status
        policy: Optional status -> percent mapping replacing the default table

    Returns:
        Percentage in [0, 100]; unrecognized statuses count as 0
    """
    mapping = DEFAULT_PROGRESS_BY_STATUS if policy is None else policy
    return max(0, min(100, mapping.get(status, 0)))


def summarize_progress(
    tasks: Iterable[Task], policy: Optional[Mapping[str, int]] = None
) -> ProgressSummary:
    by_status: dict[TaskStatus, int] = {status: 0 for status in TASK_STATUSES}
    total = 0
    progress_total = 0

    for task in tasks:
        total += 1
        progress_total += estimate_progress(task["status"], policy)
        if task["status"] in by_status:
            by_status[task["status"]] += 1

    return {
        "total": total,
        "completed": by_status["DONE"],
        "by_status": by_status,
        "average_progress": progress_total / total if total > 0 else 0.0,
    }
