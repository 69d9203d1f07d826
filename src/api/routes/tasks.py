from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskResponse,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    TaskResponse,
    ToggleTaskUseCase,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.depends import get_current_username, get_unit_of_work

router = APIRouter(prefix="/tasks", tags=["Tasks"])


class TaskRequest(BaseModel):
    """Body for create and update; omitted fields stay None"""

    title: Optional[str] = None
    description: Optional[str] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TaskResponse])
async def list_tasks(
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTasksUseCase(uow).execute(username)

    if result.is_err():
        raise_for_error(result.error, set())

    return result.value


@router.post("", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def create_task(
    request: TaskRequest,
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Task

    Raises:
        - 400 Bad Request: Title missing or empty
    """
    command = CreateTaskCommand(title=request.title, description=request.description)
    result = await CreateTaskUseCase(uow).execute(username, command)

    if result.is_err():
        raise_for_error(result.error, {"MISSING_TITLE"})

    return result.value


@router.get("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def get_task(
    task_id: int,
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTaskUseCase(uow).execute(username, task_id)

    if result.is_err():
        raise_for_error(result.error, {"TASK_NOT_FOUND"})

    return result.value


@router.put("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def update_task(
    task_id: int,
    request: TaskRequest,
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Edit Task

    Only fields present in the body are changed.

    Raises:
        - 404 Not Found: No such task for this user
    """
    command = UpdateTaskCommand(title=request.title, description=request.description)
    result = await UpdateTaskUseCase(uow).execute(username, task_id, command)

    if result.is_err():
        raise_for_error(result.error, {"TASK_NOT_FOUND"})

    return result.value


@router.put("/{task_id}/toggle", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def toggle_task(
    task_id: int,
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ToggleTaskUseCase(uow).execute(username, task_id)

    if result.is_err():
        raise_for_error(result.error, {"TASK_NOT_FOUND"})

    return result.value


@router.delete("/{task_id}", status_code=status.HTTP_200_OK, response_model=DeleteTaskResponse)
async def delete_task(
    task_id: int,
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Task

    Moves the task to the trash, where it can be restored for 2 days.

    Raises:
        - 404 Not Found: No such task for this user
    """
    result = await DeleteTaskUseCase(uow).execute(username, task_id)

    if result.is_err():
        raise_for_error(result.error, {"TASK_NOT_FOUND"})

    return result.value
