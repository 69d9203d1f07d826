"""
Create Task Use Case

Appends a new task to the user's list.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TASK_ID_COUNTER, Task
from .dtos import CreateTaskCommand, TaskResponse


class CreateTaskUseCase:
    """
    Use case for creating a task.

    Business Rules:
    - Title is required (absent or empty fails)
    - Description defaults to empty string
    - id is taken from the global task_id counter, never reused
    - New tasks start not completed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, command: CreateTaskCommand) -> Result[TaskResponse]:
        if not command.title:
            return Return.err(Error("MISSING_TITLE", "Title is required"))

        async with self.uow:
            task_id = await self.uow.counters.next_value(TASK_ID_COUNTER)
            task = Task(
                id=task_id,
                username=username,
                title=command.title,
                description=command.description or "",
                completed=False,
            )
            task = await self.uow.tasks.create(task)
            await self.uow.commit()

            return Return.ok(TaskResponse.from_entity(task))
