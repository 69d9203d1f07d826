from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.counter_repository import ICounterRepository
from src.domain.entities import Counter


class CounterRepository(ICounterRepository):
    """Counter repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_or_create(self, name: str) -> Counter:
        stmt = select(Counter).where(Counter.name == name)
        result = await self.session.exec(stmt)
        counter = result.one_or_none()
        if counter is None:
            counter = Counter(name=name, value=1)
            self.session.add(counter)
            await self.session.flush()
        return counter

    async def next_value(self, name: str) -> int:
        counter = await self._get_or_create(name)
        value = counter.value
        counter.value = value + 1
        self.session.add(counter)
        await self.session.flush()
        return value

    async def peek(self, name: str) -> int:
        counter = await self._get_or_create(name)
        return counter.value

    async def advance_to(self, name: str, value: int) -> None:
        counter = await self._get_or_create(name)
        if value > counter.value:
            counter.value = value
            self.session.add(counter)
            await self.session.flush()
