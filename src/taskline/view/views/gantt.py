# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from taskline import time
from taskline.color import (
    DETAIL_COLOR,
    MILESTONE_COLOR,
    TASK_STATUS_COLORS,
    WEEKEND_BACKGROUND,
    get_priority_color,
    get_status_color,
)
from taskline.model.layout import PeriodColumn, TimelineLayout, TimelineRow
from taskline.service.bar import get_column_band
from taskline.view.views.header import header

BAR_FILLED = "█"
BAR_REMAINING = "░"
MILESTONE_SYMBOL = "◆"
MIN_TIMELINE_WIDTH = 20
INDENT_WIDTH = 2


def gantt_view(
    layout: TimelineLayout,
    project_name: Optional[str] = None,
    left_column_width: int = 40,
    show_details: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Display a computed timeline layout as a gantt chart.

    Args:
        layout: The timeline layout to draw
        project_name: Name shown in the header
        left_column_width: Width of left column for task titles (defaults to 40)
        show_details: Whether to print assignee/estimate/priority under each task
        console: Console to print to (defaults to a new Console)
    """
    if console is None:
        console = Console()

    header(console, project_name, "gantt")

    window = layout["window"]
    date_range_str = (
        f"{time.date_to_iso_str(window['start'])} to {time.date_to_iso_str(window['end'])}"
    )
    console.print(
        f"\n[bold]{date_range_str}[/bold] (granularity: {layout['granularity']})\n"
    )

    cells = max(MIN_TIMELINE_WIDTH, console.width - left_column_width)
    backgrounds = _column_backgrounds(layout["columns"], cells)

    chart_elements: list[Text] = [
        _build_column_header(layout["columns"], cells, left_column_width, backgrounds),
        Text("─" * (left_column_width + cells), style="dim"),
    ]

    if not layout["rows"]:
        chart_elements.append(Text("No tasks to display", style="dim"))

    for row in layout["rows"]:
        chart_elements.append(
            _build_task_row(row, cells, left_column_width, backgrounds)
        )
        if show_details:
            details = _build_task_details(row, left_column_width)
            if details is not None:
                chart_elements.append(details)

    chart_elements.append(Text("─" * (left_column_width + cells), style="dim"))
    chart_elements.append(_build_legend())

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))


def percent_to_cell(percent: float, cells: int) -> int:
    """Index of the character cell containing `percent` of the timeline."""
    return max(0, min(cells - 1, int(percent / 100 * cells)))


def percent_span_to_cells(
    left_percent: float, width_percent: float, cells: int
) -> tuple[int, int]:
    """
    Convert a percentage span to a [first, end) range of character cells.

    Any visible span covers at least one cell.
    """
    first = percent_to_cell(left_percent, cells)
    end = math.ceil((left_percent + width_percent) / 100 * cells)
    return first, max(first + 1, min(cells, end))


def _column_backgrounds(columns: list[PeriodColumn], cells: int) -> list[str]:
    """Background style of each timeline cell, shading weekend columns."""
    backgrounds = [""] * cells
    count = len(columns)
    for index, column in enumerate(columns):
        if not column["is_weekend"]:
            continue
        band = get_column_band(index, count)
        first, end = percent_span_to_cells(
            band["left_percent"], band["width_percent"], cells
        )
        for cell in range(first, end):
            backgrounds[cell] = WEEKEND_BACKGROUND
    return backgrounds


def _build_column_header(
    columns: list[PeriodColumn],
    cells: int,
    left_column_width: int,
    backgrounds: list[str],
) -> Text:
    """
    Build the header row with one short label per column.

    Labels that would overlap the previous label are elided.
    """
    characters = [" "] * cells
    count = len(columns)
    next_free = 0
    for index, column in enumerate(columns):
        label = column["short_label"]
        first = percent_to_cell(get_column_band(index, count)["left_percent"], cells)
        if first < next_free or first + len(label) > cells:
            continue
        for offset, character in enumerate(label):
            characters[first + offset] = character
        next_free = first + len(label) + 1

    row = Text(" " * left_column_width)
    for cell, character in enumerate(characters):
        row.append(character, style=("bold " + backgrounds[cell]).strip())
    return row


def _format_task_left_column(row: TimelineRow, left_column_width: int) -> str:
    task = row["task"]
    title = task["title"] or "[no title]"
    left_col = f"{' ' * (row['level'] * INDENT_WIDTH)}{title} {row['progress']}%"

    # Truncate with ellipsis if too long, otherwise pad to width
    if len(left_col) > left_column_width - 1:
        left_col = left_col[: left_column_width - 4] + "..."
    return left_col.ljust(left_column_width)


def _build_task_row(
    row: TimelineRow,
    cells: int,
    left_column_width: int,
    backgrounds: list[str],
) -> Text:
    task = row["task"]
    color = get_status_color(task["status"])

    text = Text()
    text.append(_format_task_left_column(row, left_column_width), style=color)

    geometry = row["geometry"]
    if geometry is None:
        for cell in range(cells):
            text.append(" ", style=backgrounds[cell])
        return text

    first, end = percent_span_to_cells(
        geometry["left_percent"], geometry["width_percent"], cells
    )
    filled_end = first + round((end - first) * row["progress"] / 100)

    milestone_cell: Optional[int] = None
    if row["milestone_percent"] is not None:
        milestone_cell = min(end - 1, percent_to_cell(row["milestone_percent"], cells))

    for cell in range(cells):
        if cell == milestone_cell:
            text.append(MILESTONE_SYMBOL, style=MILESTONE_COLOR)
        elif first <= cell < filled_end:
            text.append(BAR_FILLED, style=color)
        elif filled_end <= cell < end:
            text.append(BAR_REMAINING, style=color)
        else:
            text.append(" ", style=backgrounds[cell])

    return text


def _build_task_details(row: TimelineRow, left_column_width: int) -> Optional[Text]:
    """Build the assignee / estimate / priority line shown under a task, if any."""
    task = row["task"]
    indent = " " * (row["level"] * INDENT_WIDTH + INDENT_WIDTH)

    parts: list[Text] = []
    if task["assignee"]:
        parts.append(Text(task["assignee"], style=DETAIL_COLOR))
    if task["estimated_hours"]:
        parts.append(Text(f"{task['estimated_hours']:g}h", style=DETAIL_COLOR))
    if task["priority"] in ("HIGH", "CRITICAL"):
        parts.append(
            Text(f"! {task['priority']}", style=get_priority_color(task["priority"]))
        )
    if task["start_date"] is not None and task["due_date"] is not None:
        parts.append(
            Text(
                f"{time.date_to_month_day_label(task['start_date'])} → "
                f"{time.date_to_month_day_label(task['due_date'])}",
                style=DETAIL_COLOR,
            )
        )

    if not parts:
        return None

    details = Text(indent)
    details.append(Text("  ").join(parts))
    details.truncate(left_column_width, overflow="ellipsis")
    return details


def _build_legend() -> Text:
    legend = Text("Status: ", style="bold")
    for status, color in TASK_STATUS_COLORS.items():
        legend.append("■ ", style=color)
        legend.append(status.replace("_", " ") + "  ")
    legend.append(MILESTONE_SYMBOL + " ", style=MILESTONE_COLOR)
    legend.append("Milestone  ")
    legend.append(BAR_FILLED * 2, style="white")
    legend.append(BAR_REMAINING * 2, style="white")
    legend.append(" Progress")
    return legend
