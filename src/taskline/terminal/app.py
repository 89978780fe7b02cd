# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from taskline.logs import configure_logging
from taskline.terminal import configuration, view
from taskline.terminal.custom_typer import OrderedAliasedTyperGroup
from taskline.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Taskline - Project timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c", help="View and update settings")
app.command(name="gantt, g")(view.gantt)
app.command(name="window, w")(view.window)
app.command(name="rows, r")(view.rows)
app.command(name="summary, s")(view.summary)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log diagnostics such as orphaned parent references",
        ),
    ] = False,
) -> None:
    """
    Taskline - Project timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging(logging.DEBUG)


def run() -> None:
    app()
