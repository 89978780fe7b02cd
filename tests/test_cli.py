from pathlib import Path

import pytest
from typer.testing import CliRunner
from yaml import safe_load

from taskline import configuration
from taskline.terminal.app import app

runner = CliRunner()

PROJECT = """\
project:
  name: Website relaunch
tasks:
  - id: design
    title: Design
    status: DONE
    start_date: 2026-03-02
    due_date: 2026-03-12
  - id: build
    title: Build
    status: IN_PROGRESS
    parent_id: design
    start_date: 2026-03-22
    due_date: 2026-04-01
  - id: loop-a
    title: Loop A
    parent_id: loop-b
  - id: loop-b
    title: Loop B
    parent_id: loop-a
"""


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    path = tmp_path / "project.yaml"
    path.write_text(PROJECT, encoding="utf-8")
    return path


def test_gantt_command(project_file: Path) -> None:
    result = runner.invoke(app, ["gantt", str(project_file), "-g", "days"])

    assert result.exit_code == 0, result.output
    assert "Website relaunch" in result.output
    assert "2026-02-23 to 2026-04-15" in result.output
    assert "Loop B" in result.output


def test_gantt_alias_and_no_header(project_file: Path) -> None:
    result = runner.invoke(app, ["--no-header", "g", str(project_file)])

    assert result.exit_code == 0, result.output
    assert "Website relaunch" not in result.output
    assert "granularity: weeks" in result.output


def test_gantt_rejects_unknown_granularity(project_file: Path) -> None:
    result = runner.invoke(app, ["gantt", str(project_file), "-g", "quarters"])

    assert result.exit_code != 0


def test_window_command_with_today(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("project:\n  name: Empty\n", encoding="utf-8")

    result = runner.invoke(app, ["window", str(path), "--today", "2026-10-19"])

    assert result.exit_code == 0, result.output
    assert "2026-10-01" in result.output
    assert "2027-01-31" in result.output


def test_rows_command(project_file: Path) -> None:
    result = runner.invoke(
        app, ["rows", str(project_file)], env={"COLUMNS": "200"}
    )

    assert result.exit_code == 0, result.output
    assert "design" in result.output
    assert "100%" in result.output


def test_summary_command(project_file: Path) -> None:
    result = runner.invoke(app, ["summary", str(project_file)])

    assert result.exit_code == 0, result.output
    assert "1/4" in result.output
    assert "37.5%" in result.output


def test_invalid_date_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text('tasks:\n  - id: a\n    due_date: "soon"\n', encoding="utf-8")

    result = runner.invoke(app, ["gantt", str(path)])

    assert result.exit_code == 1


def test_missing_file_is_rejected(tmp_path: Path) -> None:
    result = runner.invoke(app, ["gantt", str(tmp_path / "nope.yaml")])

    assert result.exit_code != 0


def test_config_set_and_view() -> None:
    result = runner.invoke(
        app, ["config", "set", "-g", "months", "--trailing-padding-days", "21"]
    )

    assert result.exit_code == 0, result.output
    saved = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert saved["default_granularity"] == "months"
    assert saved["trailing_padding_days"] == 21

    result = runner.invoke(app, ["c", "v"])
    assert result.exit_code == 0, result.output
    assert "months" in result.output


def test_config_uses_configured_padding(project_file: Path) -> None:
    runner.invoke(app, ["config", "set", "--trailing-padding-days", "0"])

    result = runner.invoke(app, ["window", str(project_file)])

    assert result.exit_code == 0, result.output
    assert "2026-04-01" in result.output


def test_config_rejects_negative_padding() -> None:
    result = runner.invoke(app, ["config", "set", "--leading-padding-days", "-1"])

    assert result.exit_code != 0


def test_config_reset() -> None:
    runner.invoke(app, ["config", "set", "-lw", "20"])

    result = runner.invoke(app, ["config", "reset"])

    assert result.exit_code == 0, result.output
    saved = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert saved["left_column_width"] == 40
