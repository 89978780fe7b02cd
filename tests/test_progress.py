import pytest

from taskline.service.progress import estimate_progress, summarize_progress

from conftest import make_task


@pytest.mark.parametrize(
    "status, expected",
    [
        ("DONE", 100),
        ("TODO", 0),
        ("IN_PROGRESS", 50),
        ("IN_REVIEW", 75),
        ("BLOCKED", 25),
    ],
)
def test_progress_by_status(status: str, expected: int) -> None:
    assert estimate_progress(status) == expected


@pytest.mark.parametrize("status", ["ARCHIVED", "", "done"])
def test_unrecognized_status_counts_as_zero(status: str) -> None:
    assert estimate_progress(status) == 0


def test_custom_policy_replaces_default_table() -> None:
    policy = {"DONE": 100, "IN_REVIEW": 90}

    assert estimate_progress("IN_REVIEW", policy) == 90
    assert estimate_progress("IN_PROGRESS", policy) == 0


def test_custom_policy_is_clamped_to_percent_range() -> None:
    assert estimate_progress("DONE", {"DONE": 150}) == 100
    assert estimate_progress("TODO", {"TODO": -5}) == 0


def test_summary_counts_statuses_and_averages_progress() -> None:
    tasks = [
        make_task("1", status="DONE"),
        make_task("2", status="DONE"),
        make_task("3", status="IN_PROGRESS"),
        make_task("4", status="BLOCKED"),
    ]

    summary = summarize_progress(tasks)

    assert summary["total"] == 4
    assert summary["completed"] == 2
    assert summary["by_status"] == {
        "TODO": 0,
        "IN_PROGRESS": 1,
        "IN_REVIEW": 0,
        "DONE": 2,
        "BLOCKED": 1,
    }
    assert summary["average_progress"] == pytest.approx(68.75)


def test_summary_of_no_tasks() -> None:
    summary = summarize_progress([])

    assert summary["total"] == 0
    assert summary["average_progress"] == 0.0
