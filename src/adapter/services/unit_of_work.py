import asyncio
from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.counter_repository import CounterRepository
from src.adapter.repositories.task_repository import TaskRepository
from src.adapter.repositories.trash_repository import TrashRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy implementation of UnitOfWork pattern

    When a lock is given, it is held from __aenter__ to __aexit__ so units of
    work sharing the lock never interleave their read-modify-write cycles.
    Units of work must not be nested on the same lock.
    """

    def __init__(self, session: AsyncSession, lock: Optional[asyncio.Lock] = None):
        self.session = session
        self.lock = lock

    async def __aenter__(self):
        if self.lock is not None:
            await self.lock.acquire()
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.tasks = TaskRepository(self.session)
        self.trash = TrashRepository(self.session)
        self.counters = CounterRepository(self.session)
        return self

    async def __aexit__(self, *args):
        try:
            await self.rollback()
        finally:
            if self.lock is not None:
                self.lock.release()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
