# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from taskline.model.granularity_type import GranularityType
from taskline.model.project import Project
from taskline.model.task import Task
from taskline.repository.configuration import CONFIGURATION_REPO
from taskline.repository.project_file import ProjectFileError, ProjectFileRepository
from taskline.service.layout import TimelineLayoutCache
from taskline.service.progress import summarize_progress
from taskline.terminal.parse import parse_date, parse_granularity
from taskline.terminal.validate import validate_left_width
from taskline.time import InvalidDateError
from taskline.view.views.gantt import gantt_view
from taskline.view.views.rows import rows_view
from taskline.view.views.summary import summary_view
from taskline.view.views.window import window_view

ProjectFileArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="Project file (YAML) with a project mapping and a tasks list",
    ),
]

TodayOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--today",
        "-t",
        parser=parse_date,
        help="Reference date for the default window (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
    ),
]


def _load_project_file(path: Path) -> tuple[Project, list[Task]]:
    repository = ProjectFileRepository(path)
    try:
        return repository.get_project(), repository.get_all_tasks()
    except (ProjectFileError, InvalidDateError, OSError) as e:
        Console(stderr=True).print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _get_layout_cache() -> TimelineLayoutCache:
    config = CONFIGURATION_REPO.get_config()
    return TimelineLayoutCache(
        leading_padding_days=config["leading_padding_days"],
        trailing_padding_days=config["trailing_padding_days"],
        fallback_window_days=config["fallback_window_days"],
    )


def gantt(
    project_file: ProjectFileArgument,
    granularity: Annotated[
        Optional[str],
        typer.Option(
            "--granularity",
            "-g",
            parser=parse_granularity,
            help="Column granularity: days, weeks, or months (defaults to config)",
        ),
    ] = None,
    today: TodayOption = None,
    left_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-width",
            "-lw",
            callback=validate_left_width,
            help="Width of left column for task titles (defaults to config)",
        ),
    ] = None,
    show_details: Annotated[
        bool,
        typer.Option(
            "--details/--no-details",
            help="Show assignee, estimate and priority under each task",
        ),
    ] = True,
) -> None:
    """Display the project's tasks on a gantt chart timeline."""
    config = CONFIGURATION_REPO.get_config()
    project, tasks = _load_project_file(project_file)

    selected_granularity: GranularityType = (
        granularity  # type: ignore[assignment]
        if granularity is not None
        else config["default_granularity"]
    )
    layout = _get_layout_cache().get_layout(
        project, tasks, selected_granularity, today=today
    )

    gantt_view(
        layout,
        project_name=project["name"],
        left_column_width=(
            left_width if left_width is not None else config["left_column_width"]
        ),
        show_details=show_details,
    )


def window(
    project_file: ProjectFileArgument,
    today: TodayOption = None,
) -> None:
    """Display the date window the timeline would cover."""
    project, tasks = _load_project_file(project_file)
    window_view(
        _get_layout_cache().get_window(project, tasks, today=today),
        project_name=project["name"],
    )


def rows(
    project_file: ProjectFileArgument,
    today: TodayOption = None,
) -> None:
    """Display tasks in hierarchy order with their bar geometry and progress."""
    config = CONFIGURATION_REPO.get_config()
    project, tasks = _load_project_file(project_file)
    layout = _get_layout_cache().get_layout(
        project, tasks, config["default_granularity"], today=today
    )
    rows_view(layout["rows"], project_name=project["name"])


def summary(project_file: ProjectFileArgument) -> None:
    """Display task counts per status and the average progress."""
    project, tasks = _load_project_file(project_file)
    summary_view(summarize_progress(tasks), project_name=project["name"])
