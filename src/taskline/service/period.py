# SPDX-License-Identifier: MIT

import pendulum

from taskline import time
from taskline.model.granularity_type import GranularityType
from taskline.model.layout import DateWindow, PeriodColumn

# Months are stepped by a fixed offset rather than by calendar month.
MONTH_STEP_DAYS = 30
WEEK_STEP_DAYS = 7


def is_weekend(day: pendulum.Date) -> bool:
    return day.day_of_week in (pendulum.SATURDAY, pendulum.SUNDAY)


def _day_column(day: pendulum.Date) -> PeriodColumn:
    return {
        "anchor_date": day,
        "short_label": time.date_to_day_label(day),
        "full_label": time.date_to_month_day_label(day),
        "is_weekend": is_weekend(day),
    }


def _week_column(anchor: pendulum.Date) -> PeriodColumn:
    return {
        "anchor_date": anchor,
        "short_label": time.date_to_month_day_label(anchor),
        "full_label": time.date_to_month_day_year_label(anchor),
        "is_weekend": False,
    }


def _month_column(anchor: pendulum.Date) -> PeriodColumn:
    return {
        "anchor_date": anchor,
        "short_label": time.date_to_month_label(anchor),
        "full_label": time.date_to_month_year_label(anchor),
        "is_weekend": False,
    }


def generate_period_columns(
    window: DateWindow, granularity: GranularityType
) -> list[PeriodColumn]:
    """
    Generate the header columns for a timeline window.

    Args:
        window: The resolved date window
        granularity: "days", "weeks", or "months"

    Returns:
        Columns in increasing anchor date order. Never empty: an inverted
        window still yields a single column anchored at the window start.
    """
    start = window["start"]
    end = window["end"]
    columns: list[PeriodColumn] = []

    if granularity == "days":
        current = start
        while current <= end:
            columns.append(_day_column(current))
            current = current.add(days=1)
        if not columns:
            columns.append(_day_column(start))
    elif granularity == "weeks":
        current = start
        while current <= end:
            columns.append(_week_column(current))
            current = current.add(days=WEEK_STEP_DAYS)
        if not columns:
            columns.append(_week_column(start))
    else:  # granularity == "months"
        current = start.start_of("month")
        while current <= end:
            columns.append(_month_column(current))
            current = current.add(days=MONTH_STEP_DAYS)
        if not columns:
            columns.append(_month_column(start.start_of("month")))

    return columns
