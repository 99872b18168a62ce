"""Transfer representation of a task exchanged with API clients"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TaskDto(BaseModel):
    """
    Flat view of a task. Creator and assignee appear as id/username pairs.

    The same shape is accepted as request body: ``title`` and ``dueDate``
    are required on create, every field is optional on update, and
    ``id`` / ``createdBy*`` / ``*Username`` are ignored on input.
    Fields that are None are omitted from responses.
    """
    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    status: Optional[str] = None
    created_by_id: Optional[int] = None
    created_by_username: Optional[str] = None
    assigned_to_id: Optional[int] = None
    assigned_to_username: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def was_sent(self, field_name: str) -> bool:
        """True if the client included the field, even as null"""
        return field_name in self.model_fields_set
