from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository
from src.domain.entities import Task


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_username(self, username: str) -> List[Task]:
        stmt = select(Task).where(Task.username == username).order_by(Task.row_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, username: str, task_id: int) -> Optional[Task]:
        stmt = select(Task).where(Task.username == username, Task.id == task_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def update(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        await self.session.delete(task)
        await self.session.flush()
