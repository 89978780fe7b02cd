# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding

from taskline.view.state import get_show_header


def header(
    console: Console, project_name: Optional[str], sub_header: Optional[str] = None
) -> None:
    """Print the application header with project information.

    Args:
        console: Console to print to
        project_name: Name of the project being displayed
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    name = escape(project_name or "Untitled project")

    console.print(Padding("[dark_orange]taskline[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(
            Padding(f"[sandy_brown]{escape(sub_header)}[/sandy_brown]", (0, 1))
        )
    console.print(Padding(f"[plum1]{name}[/plum1]", (0, 1)))
