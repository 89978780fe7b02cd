# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import typer


def validate_non_negative(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 0:
        raise typer.BadParameter("Value must not be negative")
    return value


def validate_left_width(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if not (10 <= value <= 200):
        raise typer.BadParameter("Left column width must be between 10 and 200")
    return value


def validate_log_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    level = level.upper()
    if level not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"Unknown log level '{level}'")
    return level
