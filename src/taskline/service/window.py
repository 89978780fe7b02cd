# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional

import pendulum

from taskline import time
from taskline.model.layout import DateWindow
from taskline.model.project import Project
from taskline.model.task import Task

logger = logging.getLogger(__name__)

LEADING_PADDING_DAYS = 7
TRAILING_PADDING_DAYS = 14
FALLBACK_WINDOW_DAYS = 90


def collect_dates(project: Project, tasks: Iterable[Task]) -> list[pendulum.Date]:
    """Gather every known task and project date into one pool."""
    dates: list[pendulum.Date] = []
    for task in tasks:
        if task["start_date"] is not None:
            dates.append(task["start_date"])
        if task["due_date"] is not None:
            dates.append(task["due_date"])
    if project["start_date"] is not None:
        dates.append(project["start_date"])
    if project["end_date"] is not None:
        dates.append(project["end_date"])
    return dates


def default_date_window(
    today: Optional[pendulum.Date] = None,
    fallback_window_days: int = FALLBACK_WINDOW_DAYS,
) -> DateWindow:
    """
    Window used when nothing is scheduled yet.

    Runs from the start of the current month to the end of the month that
    contains today + fallback_window_days.
    """
    current = today if today is not None else time.today()
    return {
        "start": current.start_of("month"),
        "end": current.add(days=fallback_window_days).end_of("month"),
    }


def resolve_date_window(
    project: Project,
    tasks: Iterable[Task],
    today: Optional[pendulum.Date] = None,
    leading_padding_days: int = LEADING_PADDING_DAYS,
    trailing_padding_days: int = TRAILING_PADDING_DAYS,
    fallback_window_days: int = FALLBACK_WINDOW_DAYS,
) -> DateWindow:
    """
    Derive the visible timeline window from a project and its tasks.

    Args:
        project: Project whose start/end dates bound the initiative
        tasks: Tasks whose start and due dates should be visible
        today: Reference date for the fallback window (defaults to local today)
        leading_padding_days: Days added before the earliest date
        trailing_padding_days: Days added after the latest date
        fallback_window_days: Lookahead used when no dates are known

    Returns:
        A DateWindow containing every collected date
    """
    dates = collect_dates(project, tasks)

    if not dates:
        window = default_date_window(today, fallback_window_days)
        logger.debug(
            "No scheduled dates, falling back to %s - %s",
            window["start"],
            window["end"],
        )
        return window

    return {
        "start": min(dates).subtract(days=leading_padding_days),
        "end": max(dates).add(days=trailing_padding_days),
    }
