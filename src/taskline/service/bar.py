# SPDX-License-Identifier: MIT

from typing import Optional

from taskline import time
from taskline.model.layout import DateWindow, TaskBarGeometry
from taskline.model.task import Task


def position_task_bar(window: DateWindow, task: Task) -> Optional[TaskBarGeometry]:
    """
    Map a task's [start_date, due_date] interval onto the window as percentages.

    Args:
        window: The resolved date window
        task: The task to position

    Returns:
        Left offset and width as percentages of the window duration, or None
        when the task can't be drawn: a missing bound, a zero-length window,
        or a bar that ends up with no visible width.
    """
    task_start = task["start_date"]
    task_due = task["due_date"]
    if task_start is None or task_due is None:
        return None

    total_duration = time.days_between(window["start"], window["end"])
    if total_duration <= 0:
        return None

    task_offset = time.days_between(window["start"], task_start)
    task_span = time.days_between(task_start, task_due)

    left_percent = max(0.0, task_offset / total_duration * 100)
    width_percent = min(100 - left_percent, task_span / total_duration * 100)

    if width_percent <= 0:
        return None

    return {"left_percent": left_percent, "width_percent": width_percent}


def get_milestone_percent(
    task: Task, geometry: Optional[TaskBarGeometry]
) -> Optional[float]:
    """Position of the completion marker drawn at the right edge of a done task's bar."""
    if geometry is None or task["status"] != "DONE":
        return None
    return geometry["left_percent"] + geometry["width_percent"]


def get_column_band(index: int, count: int) -> TaskBarGeometry:
    """Horizontal band occupied by column `index` of `count` equal-width columns."""
    return {
        "left_percent": index / count * 100,
        "width_percent": 100 / count,
    }
