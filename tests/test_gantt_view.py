from rich.console import Console

from taskline.service.layout import build_timeline_layout
from taskline.view.views.gantt import (
    BAR_FILLED,
    BAR_REMAINING,
    MILESTONE_SYMBOL,
    gantt_view,
    percent_span_to_cells,
    percent_to_cell,
)

from conftest import day, make_project, make_task


def _render(layout, **kwargs) -> str:
    console = Console(width=100, record=True, color_system=None)
    gantt_view(layout, project_name="Launch", console=console, **kwargs)
    return console.export_text()


def test_percent_span_covers_at_least_one_cell() -> None:
    assert percent_span_to_cells(0.0, 0.1, 60) == (0, 1)
    assert percent_span_to_cells(50.0, 50.0, 60) == (30, 60)
    assert percent_to_cell(100.0, 60) == 59


def test_gantt_view_renders_rows_bars_and_legend() -> None:
    tasks = [
        make_task(
            "1",
            title="Design",
            status="DONE",
            start_date=day(0),
            due_date=day(10),
            assignee="Dana",
            estimated_hours=16,
        ),
        make_task(
            "2",
            title="Build",
            status="IN_PROGRESS",
            priority="CRITICAL",
            parent_id="1",
            start_date=day(10),
            due_date=day(30),
        ),
        make_task("3", title="Unscheduled"),
    ]
    layout = build_timeline_layout(make_project(), tasks, "weeks")

    output = _render(layout)

    assert "taskline" in output
    assert "2026-02-23 to 2026-04-15" in output
    assert "Feb 23" in output
    lines = output.splitlines()
    design = next(line for line in lines if line.startswith("Design 100%"))
    assert MILESTONE_SYMBOL in design
    build = next(line for line in lines if line.startswith("  Build 50%"))
    assert BAR_FILLED in build and BAR_REMAINING in build
    assert "Dana" in output
    assert "16h" in output
    assert "! CRITICAL" in output
    unscheduled = next(line for line in lines if line.startswith("Unscheduled 0%"))
    assert BAR_FILLED not in unscheduled
    assert "Milestone" in output


def test_gantt_view_without_details_or_header() -> None:
    from taskline.view import state as view_state

    view_state.set_show_header(False)
    tasks = [make_task("1", title="Solo", assignee="Dana")]
    layout = build_timeline_layout(make_project(), tasks, "days", today=day(0))

    output = _render(layout, show_details=False)

    assert "taskline" not in output
    assert "Dana" not in output
    assert "Solo 0%" in output


def test_gantt_view_with_no_tasks() -> None:
    layout = build_timeline_layout(make_project(), [], "months", today=day(0))

    assert "No tasks to display" in _render(layout)
