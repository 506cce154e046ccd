"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_task_service
from src.schemas.task import (
    MessageResponse,
    TaskCreate,
    TaskCreatedResponse,
    TaskResponse,
    TaskUpdate,
)
from src.services.tasks import TaskService

router = APIRouter(prefix="/api/tarefas", tags=["tasks"])


@router.post("", response_model=TaskCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a task for a user."""
    task_id = service.create_task(
        task_data.owner_id,
        task_data.title,
        task_data.description,
        task_data.scheduled,
    )
    return TaskCreatedResponse(message="Task added!", id=task_id)


@router.get(
    "/{user_id}",
    response_model=list[TaskResponse],
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
)
def list_tasks(
    user_id: str,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """List a user's tasks. Responds 404 when the user has none."""
    tasks = service.list_tasks(user_id)
    if not tasks:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "No tasks found for this user."},
        )
    return tasks


@router.put("/{task_id}", response_model=MessageResponse)
def update_task(
    task_id: str,
    task_data: TaskUpdate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Update any of a task's title, description and schedule."""
    service.update_task(
        task_id,
        title=task_data.title,
        description=task_data.description,
        scheduled=task_data.scheduled,
    )
    return MessageResponse(message="Task updated successfully!")


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: str,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete a task."""
    service.delete_task(task_id)
    return MessageResponse(message="Task deleted successfully!")
