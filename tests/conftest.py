"""
Pytest configuration and shared fixtures.
"""

import json
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from task_tracker.config import reload_config
from task_tracker.models import TaskManager


@pytest.fixture(autouse=True)  # type: ignore[misc]
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Run every test in a clean directory with no TASK_TRACKER_* variables."""
    for name in ("TASK_TRACKER_FILE", "TASK_TRACKER_LOG_DIR", "TASK_TRACKER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reload_config()

    yield

    for name in ("TASK_TRACKER_FILE", "TASK_TRACKER_LOG_DIR", "TASK_TRACKER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reload_config()


@pytest.fixture  # type: ignore[misc]
def tasks_file(tmp_path: Path) -> Path:
    """Path of a backing file that does not exist yet."""
    return tmp_path / "data" / "tasks.json"


@pytest.fixture  # type: ignore[misc]
def task_manager(tasks_file: Path) -> TaskManager:
    """TaskManager pointing at an empty temporary file location."""
    return TaskManager(tasks_file)


@pytest.fixture  # type: ignore[misc]
def sample_tasks() -> list[dict[str, Any]]:
    """Task records in the on-disk format."""
    return [
        {
            "id": 1,
            "description": "Buy milk",
            "status": "todo",
            "createdAt": "2025-08-24T08:00:00+00:00",
            "updatedAt": "2025-08-24T08:00:00+00:00",
        },
        {
            "id": 2,
            "description": "Write report",
            "status": "in-progress",
            "createdAt": "2025-08-24T09:00:00+00:00",
            "updatedAt": "2025-08-24T09:30:00+00:00",
        },
        {
            "id": 3,
            "description": "Call plumber",
            "status": "done",
            "createdAt": "2025-08-24T10:00:00+00:00",
            "updatedAt": "2025-08-24T11:00:00+00:00",
        },
    ]


@pytest.fixture  # type: ignore[misc]
def write_tasks(tasks_file: Path):
    """Write raw records (or raw text) to the backing file."""

    def _write(data: Any) -> Path:
        tasks_file.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            tasks_file.write_text(data, encoding="utf-8")
        else:
            tasks_file.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return tasks_file

    return _write


@pytest.fixture  # type: ignore[misc]
def read_records():
    """Read the records currently stored in a backing file."""

    def _read(path: Path) -> list[dict[str, Any]]:
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    return _read


# Pytest configuration
def pytest_collection_modifyitems(config: Any, items: list[Any]) -> None:
    """Add markers based on file location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "cli" in str(item.fspath):
            item.add_marker(pytest.mark.cli)
