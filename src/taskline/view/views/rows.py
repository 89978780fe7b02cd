# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskline import time
from taskline.color import get_status_color
from taskline.model.layout import TimelineRow
from taskline.view.views.header import header


def rows_view(
    rows: list[TimelineRow],
    project_name: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Display hierarchy-ordered task rows as a table."""
    if console is None:
        console = Console()

    header(console, project_name, "rows")

    table = Table(box=None, padding=(0, 1))
    table.add_column("Level", justify="right")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Progress", justify="right")
    table.add_column("Start")
    table.add_column("Due")
    table.add_column("Bar")

    for row in rows:
        task = row["task"]
        geometry = row["geometry"]
        bar = (
            f"{geometry['left_percent']:.1f}% +{geometry['width_percent']:.1f}%"
            if geometry is not None
            else "-"
        )
        table.add_row(
            str(row["level"]),
            Text(task["id"]),
            Text("  " * row["level"] + (task["title"] or "[no title]")),
            Text(task["status"], style=get_status_color(task["status"])),
            f"{row['progress']}%",
            time.date_to_iso_str_optional(task["start_date"]) or "-",
            time.date_to_iso_str_optional(task["due_date"]) or "-",
            bar,
        )

    console.print()
    console.print(table)
    console.print()
