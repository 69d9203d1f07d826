"""
Task Use Cases

Per-user task CRUD. Every operation is scoped by the owner's username.
"""

from .list_tasks_use_case import ListTasksUseCase
from .get_task_use_case import GetTaskUseCase
from .create_task_use_case import CreateTaskUseCase
from .update_task_use_case import UpdateTaskUseCase
from .toggle_task_use_case import ToggleTaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .dtos import (
    CreateTaskCommand,
    UpdateTaskCommand,
    TaskResponse,
    TrashEntryResponse,
    DeleteTaskResponse,
    RestoreTasksResponse,
)

__all__ = [
    # Use Cases
    "ListTasksUseCase",
    "GetTaskUseCase",
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "ToggleTaskUseCase",
    "DeleteTaskUseCase",
    # DTOs
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "TaskResponse",
    "TrashEntryResponse",
    "DeleteTaskResponse",
    "RestoreTasksResponse",
]
