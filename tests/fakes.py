# tests/fakes.py

from __future__ import annotations

from typing import Dict, List, Optional

from taskhub.features.tasks.domain import Task, TaskStatus
from taskhub.features.users.domain import User, UserRef


class FakeUserRepository:
    """In-memory stand-in for UserRepository"""

    def __init__(self, users: List[User]) -> None:
        self.users: Dict[int, User] = {user.id: user for user in users}

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    async def find_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)


class FakeTaskRepository:
    """
    In-memory stand-in for TaskRepository.

    Stores copies so tests only see what was explicitly saved.
    """

    def __init__(self) -> None:
        self.tasks: Dict[int, Task] = {}
        self._next_id = 1

    def seed(self, title: str, creator: User, assignee: Optional[User] = None, **fields) -> Task:
        task = Task(
            id=self._next_id,
            title=title,
            due_date=fields.pop("due_date", "2030-01-01"),
            created_by=UserRef(id=creator.id, username=creator.username),
            assigned_to=UserRef(id=assignee.id, username=assignee.username) if assignee else None,
            **fields,
        )
        self.tasks[task.id] = task
        self._next_id += 1
        return task.model_copy(deep=True)

    async def find_by_id(self, task_id: int) -> Optional[Task]:
        task = self.tasks.get(task_id)
        return task.model_copy(deep=True) if task else None

    async def find_all(self) -> List[Task]:
        return [task.model_copy(deep=True) for task in self.tasks.values()]

    async def find_by_status(self, status: TaskStatus) -> List[Task]:
        return [t.model_copy(deep=True) for t in self.tasks.values() if t.status == status]

    async def find_by_assigned_to_or_created_by(
        self, user_id: int, status: Optional[TaskStatus] = None
    ) -> List[Task]:
        return [
            t.model_copy(deep=True)
            for t in self.tasks.values()
            if user_id in (t.assignee_id, t.creator_id) and (status is None or t.status == status)
        ]

    async def create(self, task: Task) -> Task:
        if task.created_by is None:
            raise ValueError("Task creator must be set before saving")
        stored = task.model_copy(update={"id": self._next_id}, deep=True)
        self.tasks[stored.id] = stored
        self._next_id += 1
        return stored.model_copy(deep=True)

    async def update(self, task: Task) -> Optional[Task]:
        existing = self.tasks.get(task.id)
        if existing is None:
            return None
        # creator is never rewritten
        stored = task.model_copy(update={"created_by": existing.created_by}, deep=True)
        self.tasks[task.id] = stored
        return stored.model_copy(deep=True)

    async def delete(self, task_id: int) -> bool:
        return self.tasks.pop(task_id, None) is not None
