"""Tasks feature module"""

from taskhub.features.tasks.api import router
from taskhub.features.tasks.repository import TaskRepository
from taskhub.features.tasks.service import TaskService
from taskhub.features.tasks.schemas import TaskDto
from taskhub.features.tasks.domain import Task, TaskStatus, parse_status
from taskhub.features.tasks.mapping import to_entity, to_transfer

__all__ = [
    "router",
    "TaskRepository",
    "TaskService",
    "TaskDto",
    "Task",
    "TaskStatus",
    "parse_status",
    "to_entity",
    "to_transfer",
]
