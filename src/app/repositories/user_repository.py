from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_identifier(self, identifier: str) -> Optional[User]:
        """Get user by username, falling back to email"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """All users in creation order"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of registered users"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass
