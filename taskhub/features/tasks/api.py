"""Tasks API endpoints"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.db import get_db
from taskhub.middleware.auth import get_current_principal
from taskhub.security.principal import Principal
from taskhub.features.tasks.repository import TaskRepository
from taskhub.features.tasks.schemas import TaskDto
from taskhub.features.tasks.service import TaskService
from taskhub.features.users.repository import UserRepository
from taskhub.features.users.service import UserService

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(TaskRepository(db), UserService(UserRepository(db)))


@router.get("", response_model=List[TaskDto], response_model_exclude_none=True)
async def list_tasks(
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service)
):
    """Returns all tasks visible to the authenticated user"""
    return await service.list_tasks(principal)


@router.get("/status/{task_status}", response_model=List[TaskDto], response_model_exclude_none=True)
async def get_tasks_by_status(
    task_status: str,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service)
):
    """Returns visible tasks with the given status (TODO, IN_PROGRESS, COMPLETED)"""
    return await service.get_tasks_by_status(principal, task_status)


@router.get("/{task_id}", response_model=TaskDto, response_model_exclude_none=True)
async def get_task(
    task_id: int,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service)
):
    """Returns a task by its ID if the user has access"""
    return await service.get_task(principal, task_id)


@router.post(
    "",
    response_model=TaskDto,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    request: TaskDto,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service)
):
    """
    Create a new task.

    The caller becomes the creator; the task is assigned to
    ``assignedToId`` or, if omitted, to the caller.
    """
    return await service.create_task(principal, request)


@router.put("/{task_id}", response_model=TaskDto, response_model_exclude_none=True)
async def update_task(
    task_id: int,
    request: TaskDto,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service)
):
    """Partially update a task if the user has permission"""
    return await service.update_task(principal, task_id, request)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_task(
    task_id: int,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service)
):
    """Delete a task if the user is its creator or an admin"""
    await service.delete_task(principal, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
