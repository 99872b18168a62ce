"""Business logic for tasks"""

import logging
from typing import List, Tuple

from taskhub.errors import AccessDeniedError, ResourceNotFoundError, ValidationFailure
from taskhub.features.tasks.domain import Task, parse_status
from taskhub.features.tasks.mapping import to_entity, to_transfer
from taskhub.features.tasks.repository import TaskRepository
from taskhub.features.tasks.schemas import TaskDto
from taskhub.features.users.domain import User, UserRef
from taskhub.features.users.service import UserService
from taskhub.security.policy import TaskAccess
from taskhub.security.principal import Principal

logger = logging.getLogger(__name__)


class TaskService:
    """Service layer for task business logic"""

    def __init__(self, repository: TaskRepository, users: UserService):
        self.repository = repository
        self.users = users

    async def list_tasks(self, principal: Principal) -> List[TaskDto]:
        """
        Tasks visible to the caller.

        Users whose roles grant VIEW_ANY_TASK get every task; everyone else
        gets the tasks they created or are assigned to.
        """
        user, access = await self._resolve(principal)
        if access.sees_all_tasks:
            tasks = await self.repository.find_all()
        else:
            tasks = await self.repository.find_by_assigned_to_or_created_by(user.id)
        return [to_transfer(task) for task in tasks]

    async def get_task(self, principal: Principal, task_id: int) -> TaskDto:
        """
        Raises:
            ResourceNotFoundError: If the task does not exist or the caller
                may not read it
        """
        _, access = await self._resolve(principal)
        task = await self._load(task_id)

        if not access.can_read(task.creator_id, task.assignee_id):
            logger.info(f"User {access.user_id} denied read access to task {task_id}")
            raise AccessDeniedError("You do not have access to this task")

        return to_transfer(task)

    async def create_task(self, principal: Principal, request: TaskDto) -> TaskDto:
        """
        Create a task owned by the caller.

        Business rules:
        - Title must be non-blank and a due date must be given
        - Creator is always the caller
        - Assignee is the given user, or the caller when none is given
        - Status defaults to TODO

        Raises:
            ValidationFailure: Missing title / due date or unknown status
            ResourceNotFoundError: If the assignee does not exist
        """
        user, _ = await self._resolve(principal)

        if request.title is None or not request.title.strip():
            raise ValidationFailure("Title is required")
        if request.due_date is None:
            raise ValidationFailure("Due date is required")

        task = to_entity(request)
        task.created_by = UserRef(id=user.id, username=user.username)

        if request.assigned_to_id is not None:
            assignee = await self.users.get_by_id(request.assigned_to_id)
            task.assigned_to = UserRef(id=assignee.id, username=assignee.username)
        else:
            task.assigned_to = task.created_by

        saved = await self.repository.create(task)
        return to_transfer(saved)

    async def update_task(self, principal: Principal, task_id: int, request: TaskDto) -> TaskDto:
        """
        Apply a partial update.

        Business rules:
        - Creator, assignee or a user with UPDATE_ANY_TASK may update
        - Only fields the client sent are changed; an explicit null clears
          the description and is ignored for every other field
        - Reassignment needs creator standing or REASSIGN_ANY_TASK; without
          it a supplied assignee is silently ignored

        Raises:
            ResourceNotFoundError: If the task or new assignee does not exist,
                or the caller may not update the task
            ValidationFailure: Blank title or unknown status
        """
        _, access = await self._resolve(principal)
        task = await self._load(task_id)

        if not access.can_update(task.creator_id, task.assignee_id):
            logger.info(f"User {access.user_id} denied update of task {task_id}")
            raise AccessDeniedError("You do not have permission to update this task")

        changes = {}
        if request.title is not None:
            if not request.title.strip():
                raise ValidationFailure("Title must not be blank")
            changes["title"] = request.title
        if request.was_sent("description"):
            changes["description"] = request.description
        if request.due_date is not None:
            changes["due_date"] = request.due_date
        if request.status is not None:
            changes["status"] = parse_status(request.status)

        if request.assigned_to_id is not None:
            if access.can_reassign(task.creator_id):
                assignee = await self.users.get_by_id(request.assigned_to_id)
                changes["assigned_to"] = UserRef(id=assignee.id, username=assignee.username)
            else:
                logger.info(
                    f"Ignoring reassignment of task {task_id} by user {access.user_id}: "
                    f"not creator or admin"
                )

        updated = await self.repository.update(task.model_copy(update=changes))
        if updated is None:
            raise ResourceNotFoundError(resource_name="Task", field_name="id", field_value=task_id)
        return to_transfer(updated)

    async def delete_task(self, principal: Principal, task_id: int) -> None:
        """
        Permanently remove a task. Only the creator or a user with
        DELETE_ANY_TASK may delete.

        Raises:
            ResourceNotFoundError: If the task does not exist or the caller
                may not delete it
        """
        _, access = await self._resolve(principal)
        task = await self._load(task_id)

        if not access.can_delete(task.creator_id):
            logger.info(f"User {access.user_id} denied deletion of task {task_id}")
            raise AccessDeniedError("You do not have permission to delete this task")

        await self.repository.delete(task_id)
        logger.info(f"Task {task_id} deleted by user {access.user_id}")

    async def get_tasks_by_status(self, principal: Principal, status: str) -> List[TaskDto]:
        """
        Visible tasks with the given status.

        Raises:
            ValidationFailure: If the status name is not recognised
        """
        user, access = await self._resolve(principal)
        task_status = parse_status(status)

        if access.sees_all_tasks:
            tasks = await self.repository.find_by_status(task_status)
        else:
            tasks = await self.repository.find_by_assigned_to_or_created_by(user.id, task_status)
        return [to_transfer(task) for task in tasks]

    async def _resolve(self, principal: Principal) -> Tuple[User, TaskAccess]:
        user = await self.users.resolve(principal.username)
        return user, TaskAccess.for_user(user.id, principal.roles)

    async def _load(self, task_id: int) -> Task:
        task = await self.repository.find_by_id(task_id)
        if task is None:
            raise ResourceNotFoundError(resource_name="Task", field_name="id", field_value=task_id)
        return task
