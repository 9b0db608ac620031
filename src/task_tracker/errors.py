"""
Error types for Task Tracker.

This module provides the exception hierarchy raised by the task manager.
"""

from typing import Optional


class TaskTrackerError(Exception):
    """Base error for task tracker operations."""


class PathResolutionError(TaskTrackerError):
    """Raised when the backing file path cannot be made absolute."""


class LoadError(TaskTrackerError):
    """Raised when an existing backing file cannot be read or parsed."""


class PersistenceError(TaskTrackerError):
    """Raised when the task list cannot be written to the backing file."""


class ValidationError(TaskTrackerError):
    """Raised for invalid input such as an empty description."""


class NotFoundError(TaskTrackerError):
    """Raised when no task has the requested ID."""

    def __init__(self, task_id: int, message: Optional[str] = None):
        self.task_id = task_id
        super().__init__(message or f"task with ID {task_id} not found")
