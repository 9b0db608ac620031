"""
Task models for Task Tracker.

This module provides the task record and the file-backed task manager.
"""

from .task import Task, TaskStatus
from .task_manager import TaskManager

__all__ = [
    "Task",
    "TaskStatus",
    "TaskManager",
]
