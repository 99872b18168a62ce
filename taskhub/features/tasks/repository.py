"""SQLAlchemy repository for tasks"""

import logging
from typing import List, Optional
from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.db.models.task import Task as TaskORM
from taskhub.features.tasks.domain import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskRepository:
    """Repository for task operations using SQLAlchemy"""

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with a database session.

        Args:
            db: SQLAlchemy async database session
        """
        self.db = db

    async def find_by_id(self, task_id: int) -> Optional[Task]:
        stmt = (
            select(TaskORM)
            .where(TaskORM.id == task_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        orm_task = result.scalar_one_or_none()
        return self._to_domain_model(orm_task) if orm_task else None

    async def find_all(self) -> List[Task]:
        return await self._find(select(TaskORM))

    async def find_by_status(self, status: TaskStatus) -> List[Task]:
        return await self._find(select(TaskORM).where(TaskORM.status == status.value))

    async def find_by_assigned_to_or_created_by(
        self,
        user_id: int,
        status: Optional[TaskStatus] = None
    ) -> List[Task]:
        """
        Tasks the user created or is assigned to.

        Args:
            user_id: The user whose tasks to return
            status: Optional status the tasks must also have
        """
        stmt = select(TaskORM).where(
            or_(TaskORM.assigned_to_id == user_id, TaskORM.created_by_id == user_id)
        )
        if status is not None:
            stmt = stmt.where(TaskORM.status == status.value)
        return await self._find(stmt)

    async def create(self, task: Task) -> Task:
        """Insert a new task; creator must be set"""
        if task.created_by is None:
            raise ValueError("Task creator must be set before saving")

        orm_task = TaskORM(
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status.value,
            created_by_id=task.created_by.id,
            assigned_to_id=task.assignee_id,
        )
        self.db.add(orm_task)
        await self.db.commit()
        logger.info(f"Created task {orm_task.id} for user {task.created_by.id}")
        return await self.find_by_id(orm_task.id)

    async def update(self, task: Task) -> Optional[Task]:
        """Write the mutable fields of an existing task; creator is left alone"""
        result = await self.db.execute(select(TaskORM).where(TaskORM.id == task.id))
        orm_task = result.scalar_one_or_none()
        if orm_task is None:
            return None

        orm_task.title = task.title
        orm_task.description = task.description
        orm_task.due_date = task.due_date
        orm_task.status = task.status.value
        orm_task.assigned_to_id = task.assignee_id
        await self.db.commit()
        return await self.find_by_id(task.id)

    async def delete(self, task_id: int) -> bool:
        result = await self.db.execute(delete(TaskORM).where(TaskORM.id == task_id))
        await self.db.commit()
        return result.rowcount > 0

    async def _find(self, stmt) -> List[Task]:
        result = await self.db.execute(stmt)
        return [self._to_domain_model(orm_task) for orm_task in result.scalars().all()]

    def _to_domain_model(self, orm_task: TaskORM) -> Task:
        """Convert SQLAlchemy ORM model to Pydantic domain model"""
        return Task.model_validate(orm_task)
