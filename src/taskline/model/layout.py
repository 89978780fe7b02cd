# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskline.model.granularity_type import GranularityType
from taskline.model.task import Task, TaskId, TaskStatus


class DateWindow(TypedDict):
    start: pendulum.Date
    end: pendulum.Date


class PeriodColumn(TypedDict):
    anchor_date: pendulum.Date
    short_label: str
    full_label: str
    is_weekend: bool


class TaskBarGeometry(TypedDict):
    left_percent: float
    width_percent: float


class HierarchyRow(TypedDict):
    task: Task
    level: int


class TimelineRow(TypedDict):
    task: Task
    level: int
    geometry: Optional[TaskBarGeometry]
    progress: int
    milestone_percent: Optional[float]


class ProgressSummary(TypedDict):
    total: int
    completed: int
    by_status: dict[TaskStatus, int]
    average_progress: float


class TimelineLayout(TypedDict):
    granularity: GranularityType
    window: DateWindow
    columns: list[PeriodColumn]
    rows: list[TimelineRow]
    geometry_by_task_id: dict[TaskId, TaskBarGeometry]
