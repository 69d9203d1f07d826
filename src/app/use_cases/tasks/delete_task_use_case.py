"""
Delete Task Use Case

Soft delete: the task moves to the user's trash.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import TrashEntry
from .dtos import DeleteTaskResponse


class DeleteTaskUseCase:
    """
    Use case for deleting a task.

    Business Rules:
    - Task is removed from the active list
    - A TrashEntry snapshot with deleted_at = now is appended to the trash
    - The entry is recoverable for 2 days (see ListTrashUseCase)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, task_id: int) -> Result[DeleteTaskResponse]:
        async with self.uow:
            task = await self.uow.tasks.get(username, task_id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            entry = TrashEntry(
                id=task.id,
                username=task.username,
                title=task.title,
                description=task.description,
                completed=task.completed,
                created_at=task.created_at,
                deleted_at=utcnow(),
            )
            await self.uow.tasks.delete(task)
            await self.uow.trash.create(entry)
            await self.uow.commit()

            return Return.ok(DeleteTaskResponse(message="Task moved to trash"))
