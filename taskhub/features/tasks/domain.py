"""Domain models for the tasks feature"""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict

from taskhub.errors import ValidationFailure
from taskhub.features.users.domain import UserRef


class TaskStatus(str, Enum):
    """Task status enum; stored and transferred by name"""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


def parse_status(value: str) -> TaskStatus:
    """
    Parse a status name. Matching is exact and case-sensitive.

    Raises:
        ValidationFailure: If the text is not one of the status names
    """
    try:
        return TaskStatus(value)
    except ValueError:
        allowed = ", ".join(status.value for status in TaskStatus)
        raise ValidationFailure(f"Invalid status '{value}'. Expected one of: {allowed}")


class Task(BaseModel):
    """
    Persisted task.

    ``id`` and ``created_by`` are only ever set by the service and the
    repository; ``created_by`` never changes after creation.
    """
    id: Optional[int] = None
    title: str
    description: Optional[str] = None
    due_date: date
    status: TaskStatus = TaskStatus.TODO
    created_by: Optional[UserRef] = None
    assigned_to: Optional[UserRef] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def creator_id(self) -> Optional[int]:
        return self.created_by.id if self.created_by else None

    @property
    def assignee_id(self) -> Optional[int]:
        return self.assigned_to.id if self.assigned_to else None
