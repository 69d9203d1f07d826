from abc import ABC, abstractmethod

from src.app.repositories.counter_repository import ICounterRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.trash_repository import ITrashRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    tasks: ITaskRepository
    trash: ITrashRepository
    counters: ICounterRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
