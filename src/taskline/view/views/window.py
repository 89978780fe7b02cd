# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table

from taskline import time
from taskline.model.layout import DateWindow
from taskline.view.views.header import header


def window_view(
    window: DateWindow,
    project_name: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Display the resolved timeline window."""
    if console is None:
        console = Console()

    header(console, project_name, "window")

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Bound", style="cyan")
    table.add_column("Date", style="magenta")
    table.add_row("start", time.date_to_display_str(window["start"]))
    table.add_row("end", time.date_to_display_str(window["end"]))
    table.add_row("days", str(time.days_between(window["start"], window["end"])))

    console.print()
    console.print(table)
    console.print()
