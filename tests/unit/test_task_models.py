"""
Unit tests for the Task data model.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as ModelValidationError

from task_tracker.models import Task, TaskStatus


class TestTaskStatus:
    """Test TaskStatus enumeration."""

    def test_values_in_order(self):
        assert TaskStatus.values() == ["todo", "in-progress", "done"]

    def test_compares_equal_to_plain_string(self):
        assert TaskStatus.IN_PROGRESS == "in-progress"
        assert TaskStatus("done") is TaskStatus.DONE


class TestTask:
    """Test Task data model."""

    def test_task_from_record(self, sample_tasks):
        """Test parsing an on-disk record with camelCase timestamps."""
        task = Task(**sample_tasks[1])

        assert task.id == 2
        assert task.description == "Write report"
        assert task.status is TaskStatus.IN_PROGRESS
        assert task.created_at == datetime(2025, 8, 24, 9, 0, tzinfo=timezone.utc)
        assert task.updated_at == datetime(2025, 8, 24, 9, 30, tzinfo=timezone.utc)

    def test_task_defaults(self):
        """Test Task with only the required fields."""
        task = Task(id=1, description="Minimal")

        assert task.status is TaskStatus.TODO
        assert task.created_at.tzinfo is not None
        assert task.updated_at.tzinfo is not None

    def test_to_record_field_order_and_aliases(self):
        stamp = datetime(2025, 9, 8, 10, 0, tzinfo=timezone.utc)
        task = Task(id=7, description="Ship it", created_at=stamp, updated_at=stamp)

        record = task.to_record()

        assert list(record) == ["id", "description", "status", "createdAt", "updatedAt"]
        assert record["status"] == "todo"
        assert record["createdAt"].startswith("2025-09-08T10:00:00")

    def test_record_round_trip(self, sample_tasks):
        for record in sample_tasks:
            assert Task(**Task(**record).to_record()) == Task(**record)

    @pytest.mark.parametrize(
        "record",
        [
            {"id": 0, "description": "zero id"},
            {"id": "abc", "description": "bad id"},
            {"id": 1, "description": "bad status", "status": "blocked"},
            {"id": 1, "description": "bad time", "createdAt": "yesterday"},
            {"id": 1, "description": "extra", "owner": "someone"},
            {"description": "missing id"},
        ],
    )
    def test_invalid_records_rejected(self, record):
        with pytest.raises(ModelValidationError):
            Task(**record)

    def test_touch_refreshes_updated_at_only(self):
        stamp = datetime(2020, 1, 1, tzinfo=timezone.utc)
        task = Task(id=1, description="Old", created_at=stamp, updated_at=stamp)

        task.touch()

        assert task.created_at == stamp
        assert task.updated_at > stamp
