# SPDX-License-Identifier: MIT

import logging
from typing import Any, Hashable, Mapping, Optional

import pendulum

from taskline.model.granularity_type import GranularityType
from taskline.model.layout import DateWindow, TaskBarGeometry, TimelineLayout, TimelineRow
from taskline.model.project import Project
from taskline.model.task import Task, TaskId
from taskline.service.bar import get_milestone_percent, position_task_bar
from taskline.service.hierarchy import linearize_task_hierarchy
from taskline.service.period import generate_period_columns
from taskline.service.progress import estimate_progress
from taskline.service.window import (
    FALLBACK_WINDOW_DAYS,
    LEADING_PADDING_DAYS,
    TRAILING_PADDING_DAYS,
    resolve_date_window,
)

logger = logging.getLogger(__name__)


def build_timeline_layout(
    project: Project,
    tasks: list[Task],
    granularity: GranularityType,
    window: Optional[DateWindow] = None,
    today: Optional[pendulum.Date] = None,
    progress_policy: Optional[Mapping[str, int]] = None,
    leading_padding_days: int = LEADING_PADDING_DAYS,
    trailing_padding_days: int = TRAILING_PADDING_DAYS,
    fallback_window_days: int = FALLBACK_WINDOW_DAYS,
) -> TimelineLayout:
    """
    Compute everything a renderer needs to draw the project timeline.

    Args:
        project: The project record
        tasks: The project's tasks
        granularity: "days", "weeks", or "months"
        window: Precomputed window; resolved from project and tasks when None
        today: Reference date for the fallback window
        progress_policy: Optional status -> percent mapping
        leading_padding_days: Days shown before the earliest date
        trailing_padding_days: Days shown after the latest date
        fallback_window_days: Lookahead used when no dates are known

    Returns:
        Header columns, hierarchy-ordered rows with bar geometry and progress,
        and the geometry of every drawable task keyed by task id
    """
    if window is None:
        window = resolve_date_window(
            project,
            tasks,
            today=today,
            leading_padding_days=leading_padding_days,
            trailing_padding_days=trailing_padding_days,
            fallback_window_days=fallback_window_days,
        )

    columns = generate_period_columns(window, granularity)

    rows: list[TimelineRow] = []
    geometry_by_task_id: dict[TaskId, TaskBarGeometry] = {}
    for hierarchy_row in linearize_task_hierarchy(tasks):
        task = hierarchy_row["task"]
        geometry = position_task_bar(window, task)
        if geometry is not None:
            geometry_by_task_id[task["id"]] = geometry
        rows.append(
            {
                "task": task,
                "level": hierarchy_row["level"],
                "geometry": geometry,
                "progress": estimate_progress(task["status"], progress_policy),
                "milestone_percent": get_milestone_percent(task, geometry),
            }
        )

    return {
        "granularity": granularity,
        "window": window,
        "columns": columns,
        "rows": rows,
        "geometry_by_task_id": geometry_by_task_id,
    }


def _freeze(record: Mapping[str, Any]) -> tuple[tuple[str, Hashable], ...]:
    return tuple(sorted(record.items()))


class TimelineLayoutCache:
    """
    Recomputes a layout only when its inputs change.

    The window is cached separately from the layout, so switching granularity
    regenerates columns and bars but keeps the resolved window.
    """

    def __init__(
        self,
        leading_padding_days: int = LEADING_PADDING_DAYS,
        trailing_padding_days: int = TRAILING_PADDING_DAYS,
        fallback_window_days: int = FALLBACK_WINDOW_DAYS,
    ) -> None:
        self.leading_padding_days = leading_padding_days
        self.trailing_padding_days = trailing_padding_days
        self.fallback_window_days = fallback_window_days
        self._window_key: Optional[Hashable] = None
        self._window: Optional[DateWindow] = None
        self._layout_key: Optional[Hashable] = None
        self._layout: Optional[TimelineLayout] = None

    def get_window(
        self,
        project: Project,
        tasks: list[Task],
        today: Optional[pendulum.Date] = None,
    ) -> DateWindow:
        key = (_freeze(project), tuple(_freeze(task) for task in tasks), today)
        if self._window is None or key != self._window_key:
            self._window = resolve_date_window(
                project,
                tasks,
                today=today,
                leading_padding_days=self.leading_padding_days,
                trailing_padding_days=self.trailing_padding_days,
                fallback_window_days=self.fallback_window_days,
            )
            self._window_key = key
        return self._window

    def get_layout(
        self,
        project: Project,
        tasks: list[Task],
        granularity: GranularityType,
        today: Optional[pendulum.Date] = None,
    ) -> TimelineLayout:
        window = self.get_window(project, tasks, today)
        key = (self._window_key, granularity)
        if self._layout is not None and key == self._layout_key:
            logger.debug("Timeline layout cache hit (%s)", granularity)
            return self._layout

        logger.debug("Timeline layout cache miss (%s)", granularity)
        self._layout = build_timeline_layout(
            project, tasks, granularity, window=window
        )
        self._layout_key = key
        return self._layout

    def clear(self) -> None:
        self._window_key = None
        self._window = None
        self._layout_key = None
        self._layout = None
