"""
Restore Trash Use Case

Moves selected trash entries back to the task list.
"""

from typing import Any

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.dtos import RestoreTasksResponse, TaskResponse
from src.domain.entities import Task


class RestoreTrashUseCase:
    """
    Use case for restoring deleted tasks.

    Business Rules:
    - ids must be a non-empty list of integers
    - Matching entries become tasks again with the same id, appended to the
      end of the task list, without deleted_at
    - Ids not in the trash are ignored silently
    - Restored tasks are returned in trash order
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, ids: Any) -> Result[RestoreTasksResponse]:
        if (
            not isinstance(ids, (list, tuple, set, frozenset))
            or not ids
            or not all(isinstance(i, int) and not isinstance(i, bool) for i in ids)
        ):
            return Return.err(Error("INVALID_REQUEST", "ids array is required"))

        wanted = set(ids)

        async with self.uow:
            entries = await self.uow.trash.list_by_username(username)

            restored = []
            for entry in entries:
                if entry.id not in wanted:
                    continue
                task = Task(
                    id=entry.id,
                    username=entry.username,
                    title=entry.title,
                    description=entry.description,
                    completed=entry.completed,
                    created_at=entry.created_at,
                )
                await self.uow.trash.delete(entry)
                task = await self.uow.tasks.create(task)
                restored.append(TaskResponse.from_entity(task))

            await self.uow.commit()

            return Return.ok(RestoreTasksResponse(restored=restored))
