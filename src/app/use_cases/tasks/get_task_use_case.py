from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TaskResponse


class GetTaskUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, task_id: int) -> Result[TaskResponse]:
        async with self.uow:
            task = await self.uow.tasks.get(username, task_id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            return Return.ok(TaskResponse.from_entity(task))
