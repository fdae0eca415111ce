"""Task Routes — owner-scoped CRUD, every endpoint behind bearer auth.

Invariants:
    - get_current_user_id resolves before the body is used; unauthenticated
      requests get 401 whatever their payload
    - The owner is always the authenticated id (body owner fields ignored)
    - Path ids are opaque strings; malformed ids behave like missing tasks (404)
    - PUT without a body is the empty update, not a validation error
"""

import logging

from fastapi import APIRouter, Body, Depends, Query, status

from taskapi.api.dependencies import get_current_user_id, get_task_service
from taskapi.core.domain_types import TaskStatus, UserId
from taskapi.schemas.auth import MessageResponse
from taskapi.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskapi.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate,
    user_id: UserId = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    """Create a task; weather derived from the city."""
    task = await service.create(
        user_id, body.title, body.description, body.city,
    )
    return TaskResponse.model_validate(task)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    status_filter: TaskStatus | None = Query(None, alias="status"),
    user_id: UserId = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    """List the caller's tasks, oldest first."""
    tasks = await service.list_tasks(user_id, status_filter)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    user_id: UserId = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = await service.get(user_id, task_id)
    return TaskResponse.model_validate(task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    body: TaskUpdate = Body(default_factory=TaskUpdate),
    user_id: UserId = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    """Partial update by presence; re-derives weather when city is given."""
    task = await service.update(
        user_id, task_id,
        title=body.title,
        description=body.description,
        city=body.city,
        status=body.status,
    )
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str,
    user_id: UserId = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    await service.delete(user_id, task_id)
    return MessageResponse(message="Task deleted successfully.")
