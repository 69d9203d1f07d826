from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.trash_repository import ITrashRepository
from src.domain.entities import TrashEntry


class TrashRepository(ITrashRepository):
    """Trash repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_username(self, username: str) -> List[TrashEntry]:
        stmt = (
            select(TrashEntry)
            .where(TrashEntry.username == username)
            .order_by(TrashEntry.row_id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, entry: TrashEntry) -> TrashEntry:
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def delete(self, entry: TrashEntry) -> None:
        await self.session.delete(entry)
        await self.session.flush()
