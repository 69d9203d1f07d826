from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import TrashEntry


class ITrashRepository(ABC):
    """Trash repository interface - application layer"""

    @abstractmethod
    async def list_by_username(self, username: str) -> List[TrashEntry]:
        """User's trash entries in deletion order"""
        pass

    @abstractmethod
    async def create(self, entry: TrashEntry) -> TrashEntry:
        """Append an entry to its owner's trash"""
        pass

    @abstractmethod
    async def delete(self, entry: TrashEntry) -> None:
        """Remove entry permanently"""
        pass
