"""Conversion between persisted tasks and their transfer representation"""

from taskhub.features.tasks.domain import Task, parse_status
from taskhub.features.tasks.schemas import TaskDto


def to_transfer(task: Task) -> TaskDto:
    dto = TaskDto(
        id=task.id,
        title=task.title,
        description=task.description,
        due_date=task.due_date,
        status=task.status.value,
    )
    if task.created_by is not None:
        dto.created_by_id = task.created_by.id
        dto.created_by_username = task.created_by.username
    if task.assigned_to is not None:
        dto.assigned_to_id = task.assigned_to.id
        dto.assigned_to_username = task.assigned_to.username
    return dto


def to_entity(dto: TaskDto) -> Task:
    """
    Build an unsaved task from client fields.

    Never sets id, creator or assignee. Expects title and due date to be
    present already.

    Raises:
        ValidationFailure: If the status name is not recognised
    """
    fields = {
        "title": dto.title,
        "description": dto.description,
        "due_date": dto.due_date,
    }
    if dto.status is not None:
        fields["status"] = parse_status(dto.status)
    return Task(**fields)
