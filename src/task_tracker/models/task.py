"""
Task model for Task Tracker.

This module provides the Task record and the TaskStatus enumeration.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Allowed task statuses."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


def now() -> datetime:
    """Current local time with UTC offset."""
    return datetime.now().astimezone()


class Task(BaseModel):
    """A single tracked task as stored in the backing file."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
    )

    id: int = Field(..., gt=0)
    description: str
    status: TaskStatus = TaskStatus.TODO
    created_at: datetime = Field(default_factory=now, alias="createdAt")
    updated_at: datetime = Field(default_factory=now, alias="updatedAt")

    def touch(self) -> None:
        """Refresh the last-modified timestamp."""
        self.updated_at = now()

    def to_record(self) -> dict:
        """Serialize to the on-disk JSON shape."""
        return self.model_dump(mode="json", by_alias=True)
