# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional

import pendulum


class InvalidDateError(ValueError):
    """Raised when a value cannot be read as a calendar date."""


def today() -> pendulum.Date:
    return pendulum.today("local").date()


def days_between(start: datetime.date, end: datetime.date) -> int:
    """Signed number of whole days from start to end."""
    return end.toordinal() - start.toordinal()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string (an ISO datetime is truncated to its date)."""
    if not date_str.strip():
        raise InvalidDateError("Invalid date: empty value")
    try:
        parsed = pendulum.parse(date_str.strip(), exact=True)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date '{date_str}': {e}") from e

    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise InvalidDateError(f"Invalid date '{date_str}': not a calendar date")


def date_from_value(value: Any) -> pendulum.Date:
    """
    Convert a raw value from a project file to a pendulum.Date.

    YAML loaders already turn unquoted ISO dates into datetime.date objects,
    so both those and strings are accepted.
    """
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value).date()
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    if isinstance(value, str):
        return date_from_str(value)
    raise InvalidDateError(f"Invalid date {value!r}: expected YYYY-MM-DD")


def date_from_value_optional(value: Any) -> Optional[pendulum.Date]:
    if value is None or value == "":
        return None
    return date_from_value(value)


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_to_iso_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_iso_str(date)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_to_day_label(date: pendulum.Date) -> str:
    return date.format("DD")


def date_to_month_day_label(date: pendulum.Date) -> str:
    return date.format("MMM DD")


def date_to_month_day_year_label(date: pendulum.Date) -> str:
    return date.format("MMM DD, YYYY")


def date_to_month_label(date: pendulum.Date) -> str:
    return date.format("MMM")


def date_to_month_year_label(date: pendulum.Date) -> str:
    return date.format("MMMM YYYY")
