from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TaskResponse


class ListTasksUseCase:
    """All of the user's tasks in insertion order"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str) -> Result[List[TaskResponse]]:
        async with self.uow:
            tasks = await self.uow.tasks.list_by_username(username)
            return Return.ok([TaskResponse.from_entity(task) for task in tasks])
