from typing import List, Optional

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        stmt = select(User).where(User.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_identifier(self, identifier: str) -> Optional[User]:
        """Username wins when one user's username equals another's email"""
        user = await self.get_by_username(identifier)
        if user is None:
            user = await self.get_by_email(identifier)
        return user

    async def list_all(self) -> List[User]:
        stmt = select(User).order_by(User.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        stmt = select(func.count()).select_from(User)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
