# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from taskline.model.granularity_type import GranularityType, to_granularity
from taskline.time import InvalidDateError, date_from_str, today


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a date option: YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a
    day offset like 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except InvalidDateError as e:
            raise typer.BadParameter(str(e))

    # Numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today().add(days=int(date))

    if date == "today" or date == "t":
        return today()
    if date == "yesterday" or date == "y":
        return today().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_granularity(granularity: Optional[str]) -> Optional[GranularityType]:
    if granularity is None:
        return None
    try:
        return to_granularity(granularity.strip().lower())
    except ValueError as e:
        raise typer.BadParameter(str(e))
