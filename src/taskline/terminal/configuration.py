# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskline import configuration
from taskline.repository.configuration import CONFIGURATION_REPO
from taskline.terminal.custom_typer import AliasedTyperGroup
from taskline.terminal.parse import parse_granularity
from taskline.terminal.validate import (
    validate_left_width,
    validate_log_level,
    validate_non_negative,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("default_granularity", config["default_granularity"])
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row("leading_padding_days", str(config["leading_padding_days"]))
    table.add_row("trailing_padding_days", str(config["trailing_padding_days"]))
    table.add_row("fallback_window_days", str(config["fallback_window_days"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set_config(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header", help="Show the header above views"
        ),
    ] = None,
    default_granularity: Annotated[
        Optional[str],
        typer.Option(
            "--default-granularity",
            "-g",
            parser=parse_granularity,
            help="Granularity used when none is given: days, weeks, or months",
        ),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width",
            "-lw",
            callback=validate_left_width,
            help="Default width of the task title column",
        ),
    ] = None,
    leading_padding_days: Annotated[
        Optional[int],
        typer.Option(
            "--leading-padding-days",
            callback=validate_non_negative,
            help="Days shown before the earliest date",
        ),
    ] = None,
    trailing_padding_days: Annotated[
        Optional[int],
        typer.Option(
            "--trailing-padding-days",
            callback=validate_non_negative,
            help="Days shown after the latest date",
        ),
    ] = None,
    fallback_window_days: Annotated[
        Optional[int],
        typer.Option(
            "--fallback-window-days",
            callback=validate_non_negative,
            help="Lookahead used when a project has no dates",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="Diagnostics log level (DEBUG, INFO, WARNING, ERROR)",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        default_granularity=default_granularity,  # type: ignore[arg-type]
        left_column_width=left_column_width,
        leading_padding_days=leading_padding_days,
        trailing_padding_days=trailing_padding_days,
        fallback_window_days=fallback_window_days,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    Console().print("[green]Configuration updated[/green]")


@app.command("reset")
def reset() -> None:
    """Restore the default configuration."""
    CONFIGURATION_REPO.reset_config()
    CONFIGURATION_REPO.flush()

    Console().print("[green]Configuration reset to defaults[/green]")
