from pathlib import Path
from typing import Any, Optional

import pendulum
import pytest

from taskline import configuration
from taskline.model.project import Project
from taskline.model.task import Task
from taskline.repository.configuration import CONFIGURATION_REPO
from taskline.view import state as view_state

DAY_0 = pendulum.date(2026, 3, 2)


def day(offset: int) -> pendulum.Date:
    return DAY_0.add(days=offset)


def make_task(task_id: str, **fields: Any) -> Task:
    task: dict[str, Any] = {
        "id": task_id,
        "title": f"Task {task_id}",
        "status": "TODO",
        "priority": "MEDIUM",
        "start_date": None,
        "due_date": None,
        "parent_id": None,
        "estimated_hours": None,
        "assignee": None,
    }
    task.update(fields)
    return task  # type: ignore[return-value]


def make_project(
    start_date: Optional[pendulum.Date] = None,
    end_date: Optional[pendulum.Date] = None,
    name: Optional[str] = "Launch",
) -> Project:
    return {"name": name, "start_date": start_date, "end_date": end_date}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration at a temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    CONFIGURATION_REPO.reload()
    view_state.set_show_header(True)
    yield config_dir
    CONFIGURATION_REPO.reload()
