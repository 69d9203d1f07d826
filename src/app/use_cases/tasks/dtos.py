"""
Task Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from src.app.use_cases.base_dto import CamelModel, UtcDateTime
from src.domain.entities import Task, TrashEntry


class CreateTaskCommand(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class UpdateTaskCommand(BaseModel):
    """None means "leave unchanged", not "clear"."""

    title: Optional[str] = None
    description: Optional[str] = None


class TaskResponse(CamelModel):
    """Task as seen by its owner"""

    id: int
    title: str
    description: str
    completed: bool
    created_at: UtcDateTime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
        )


class TrashEntryResponse(TaskResponse):
    """Task snapshot plus the moment it was deleted"""

    deleted_at: UtcDateTime

    @classmethod
    def from_entity(cls, entry: TrashEntry) -> "TrashEntryResponse":
        return cls(
            id=entry.id,
            title=entry.title,
            description=entry.description,
            completed=entry.completed,
            created_at=entry.created_at,
            deleted_at=entry.deleted_at,
        )


class DeleteTaskResponse(BaseModel):
    message: str


class RestoreTasksResponse(BaseModel):
    restored: list[TaskResponse]
