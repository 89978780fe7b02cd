import pendulum
import pytest

from taskline.model.layout import DateWindow
from taskline.service.period import generate_period_columns

from conftest import day

WINDOW: DateWindow = {"start": day(-7), "end": day(44)}


def test_day_columns_cover_window_inclusively() -> None:
    columns = generate_period_columns(WINDOW, "days")

    assert len(columns) == 52
    assert columns[0]["anchor_date"] == day(-7)
    assert columns[-1]["anchor_date"] == day(44)


def test_day_columns_label_and_flag_weekends() -> None:
    columns = generate_period_columns(WINDOW, "days")

    monday = columns[7]
    assert monday["anchor_date"] == pendulum.date(2026, 3, 2)
    assert monday["short_label"] == "02"
    assert monday["full_label"] == "Mar 02"
    assert monday["is_weekend"] is False

    weekend = [column["anchor_date"] for column in columns[:7] if column["is_weekend"]]
    assert weekend == [pendulum.date(2026, 2, 28), pendulum.date(2026, 3, 1)]


def test_week_columns_step_seven_days_from_window_start() -> None:
    columns = generate_period_columns(WINDOW, "weeks")

    assert [column["anchor_date"] for column in columns] == [
        day(offset) for offset in range(-7, 45, 7)
    ]
    assert columns[0]["short_label"] == "Feb 23"
    assert columns[0]["full_label"] == "Feb 23, 2026"
    assert not any(column["is_weekend"] for column in columns)


def test_month_columns_start_at_month_and_step_thirty_days() -> None:
    columns = generate_period_columns(WINDOW, "months")

    assert [column["anchor_date"] for column in columns] == [
        pendulum.date(2026, 2, 1),
        pendulum.date(2026, 3, 3),
        pendulum.date(2026, 4, 2),
    ]
    assert [column["short_label"] for column in columns] == ["Feb", "Mar", "Apr"]
    assert columns[0]["full_label"] == "February 2026"


@pytest.mark.parametrize("granularity", ["days", "weeks", "months"])
def test_columns_are_non_empty_and_strictly_increasing(granularity: str) -> None:
    columns = generate_period_columns(WINDOW, granularity)  # type: ignore[arg-type]

    anchors = [column["anchor_date"] for column in columns]
    assert anchors
    assert all(earlier < later for earlier, later in zip(anchors, anchors[1:]))


@pytest.mark.parametrize("granularity", ["days", "weeks", "months"])
def test_inverted_window_still_yields_a_column(granularity: str) -> None:
    window: DateWindow = {"start": day(40), "end": day(30)}

    columns = generate_period_columns(window, granularity)  # type: ignore[arg-type]

    assert len(columns) == 1


def test_single_day_window_has_one_day_column() -> None:
    window: DateWindow = {"start": day(0), "end": day(0)}

    assert len(generate_period_columns(window, "days")) == 1
