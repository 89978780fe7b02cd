# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table

from taskline.color import get_status_color
from taskline.model.layout import ProgressSummary
from taskline.view.views.header import header


def summary_view(
    summary: ProgressSummary,
    project_name: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Display task counts per status and the average progress."""
    if console is None:
        console = Console()

    header(console, project_name, "summary")

    table = Table(box=None, padding=(0, 1))
    table.add_column("Status")
    table.add_column("Tasks", justify="right")
    for status, count in summary["by_status"].items():
        table.add_row(
            f"[{get_status_color(status)}]{status.replace('_', ' ')}[/]", str(count)
        )

    console.print()
    console.print(table)
    console.print(
        f"\n[bold]{summary['completed']}/{summary['total']}[/bold] tasks done, "
        f"average progress [bold]{summary['average_progress']:.1f}%[/bold]\n"
    )
