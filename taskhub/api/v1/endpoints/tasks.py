"""Task API: thin routes delegating to TaskService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from taskhub.api.v1.dependencies import get_task_service
from taskhub.application.use_cases.tasks import TaskService
from taskhub.schemas.task import (
    TaskCreatedResponse,
    TaskCreateRequest,
    TaskResponse,
    TaskStatusUpdate,
)

router = APIRouter()


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """List every task, newest first."""
    tasks = await task_svc.list_tasks()
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskCreatedResponse)
async def create_task(
    body: TaskCreateRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a task; connected clients receive taskAdded."""
    created = await task_svc.create_task(name=body.name, status=body.status.value)
    return TaskCreatedResponse.model_validate(created)


@router.put("/{task_id}", status_code=200, response_class=Response)
async def update_task_status(
    task_id: int,
    body: TaskStatusUpdate,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    """Replace a task's status; connected clients receive taskUpdated."""
    await task_svc.update_task_status(task_id=task_id, status=body.status.value)
    return Response(status_code=200)


@router.delete("/{task_id}", status_code=200, response_class=Response)
async def delete_task(
    task_id: int,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    """Delete a task; connected clients receive taskDeleted."""
    await task_svc.delete_task(task_id=task_id)
    return Response(status_code=200)
