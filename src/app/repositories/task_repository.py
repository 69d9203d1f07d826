from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Task


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def list_by_username(self, username: str) -> List[Task]:
        """User's tasks in insertion order"""
        pass

    @abstractmethod
    async def get(self, username: str, task_id: int) -> Optional[Task]:
        """Get one of the user's tasks by id"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Append a task to its owner's list"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update existing task"""
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Remove task from the active list"""
        pass
