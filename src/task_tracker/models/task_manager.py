"""
Task manager for Task Tracker.

This module provides the TaskManager class, which owns the in-memory task list
and its JSON backing file. The whole file is rewritten after every mutation.
There is no locking: two processes writing the same file can lose updates.
"""

import json
import os
from pathlib import Path
from typing import Any, Union

import pydantic

from ..errors import (
    LoadError,
    NotFoundError,
    PathResolutionError,
    PersistenceError,
    ValidationError,
)
from ..utils.daily_logger import get_manager_logger
from .task import Task, TaskStatus, now

logger = get_manager_logger()

_task_list = pydantic.TypeAdapter(list[Task])


class TaskManager:
    """File-backed task list operations."""

    def __init__(self, file_path: Union[str, Path]):
        try:
            self.file_path = Path(os.path.abspath(os.path.expanduser(os.fspath(file_path))))
        except (OSError, TypeError, ValueError) as e:
            raise PathResolutionError(
                f"error getting absolute path for {file_path!r}: {e}"
            ) from e

        self.tasks: list[Task] = []
        self.next_id = 1
        self.load_tasks()

    # -------------------- persistence --------------------
    def load_tasks(self) -> None:
        """Load the task list from the backing file."""
        if not self.file_path.exists():
            logger.info(
                "Task file not found, it will be created on first save",
                extra={"json_data": {"path": str(self.file_path)}},
            )
            self.tasks = []
            self.next_id = 1
            return

        try:
            with open(self.file_path, encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as e:
            raise LoadError(f"error reading tasks file {self.file_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise LoadError(f"error parsing tasks file {self.file_path}: {e}") from e

        if not isinstance(raw, list):
            raise LoadError(
                f"error parsing tasks file {self.file_path}: expected a JSON array"
            )

        try:
            tasks = _task_list.validate_python(raw)
        except pydantic.ValidationError as e:
            raise LoadError(f"invalid task record in {self.file_path}: {e}") from e

        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise LoadError(f"duplicate task ID {task.id} in {self.file_path}")
            seen.add(task.id)

        self.tasks = tasks
        # Last in file order, not max(id): the manager only ever appends.
        self.next_id = self.tasks[-1].id + 1 if self.tasks else 1

        logger.info(
            "Loaded tasks",
            extra={
                "json_data": {
                    "path": str(self.file_path),
                    "count": len(self.tasks),
                    "next_id": self.next_id,
                }
            },
        )

    def save_tasks(self) -> None:
        """Replace the backing file with the full task list.

        The snapshot is written to a sibling temp file and moved into place,
        so a failed save leaves the previous file intact.
        """
        tmp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        try:
            data = [task.to_record() for task in self.tasks]
            text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
            # Lone surrogates (undecodable argv bytes) become \uXXXX escapes,
            # which json reads back to the same string.
            payload = text.encode("utf-8", errors="backslashreplace")

            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(payload)
            os.replace(tmp_path, self.file_path)
        except (OSError, TypeError, ValueError) as e:
            tmp_path.unlink(missing_ok=True)
            logger.error(
                "Error saving tasks",
                extra={"json_data": {"path": str(self.file_path), "error": str(e)}},
            )
            raise PersistenceError(f"error saving tasks to {self.file_path}: {e}") from e

        logger.debug(
            "Saved tasks",
            extra={"json_data": {"path": str(self.file_path), "count": len(self.tasks)}},
        )

    # -------------------- queries --------------------
    def find_task(self, task_id: int) -> Task:
        """Return the task with the given ID."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    def list_tasks(self) -> list[Task]:
        """Return all tasks in creation order."""
        return list(self.tasks)

    def list_filter_by_status(self, status: Union[str, TaskStatus]) -> list[Task]:
        """Return tasks whose status equals ``status``.

        The value is not checked against TaskStatus; an unknown status simply
        matches nothing.
        """
        return [task for task in self.tasks if task.status == status]

    # -------------------- mutations --------------------
    def add_task(self, description: str) -> Task:
        """Create a new task and persist the list."""
        if not description or not description.strip():
            raise ValidationError("description cannot be empty")

        timestamp = now()
        task = Task(
            id=self.next_id,
            description=description,
            status=TaskStatus.TODO,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.tasks.append(task)
        try:
            self.save_tasks()
        finally:
            self.next_id += 1

        self._log_mutation("add", task)
        return task

    def update_task(self, task_id: int, description: str) -> Task:
        """Replace a task's description.

        A blank description changes nothing but the file is still rewritten.
        """
        task = self.find_task(task_id)
        if description and description.strip():
            task.description = description
            task.touch()
        self.save_tasks()
        self._log_mutation("update", task)
        return task

    def delete_task(self, task_id: int) -> Task:
        """Remove a task, keeping the order of the others."""
        task = self.find_task(task_id)
        self.tasks.remove(task)
        self.save_tasks()
        self._log_mutation("delete", task)
        return task

    def mark_task_in_progress(self, task_id: int) -> Task:
        """Set a task's status to in-progress."""
        return self._set_status(task_id, TaskStatus.IN_PROGRESS)

    def mark_task_done(self, task_id: int) -> Task:
        """Set a task's status to done."""
        return self._set_status(task_id, TaskStatus.DONE)

    def _set_status(self, task_id: int, status: TaskStatus) -> Task:
        task = self.find_task(task_id)
        task.status = status
        task.touch()
        self.save_tasks()
        self._log_mutation(f"mark-{status.value}", task)
        return task

    def _log_mutation(self, operation: str, task: Task) -> None:
        log_data: dict[str, Any] = {
            "operation": operation,
            "task_id": task.id,
            "status": task.status.value,
            "path": str(self.file_path),
        }
        logger.info("Task %s", operation, extra={"json_data": log_data})
