from abc import ABC, abstractmethod


class ICounterRepository(ABC):
    """Named sequence repository interface - application layer"""

    @abstractmethod
    async def next_value(self, name: str) -> int:
        """Return the current value and advance the sequence by one"""
        pass

    @abstractmethod
    async def peek(self, name: str) -> int:
        """Value the next call to next_value will return"""
        pass

    @abstractmethod
    async def advance_to(self, name: str, value: int) -> None:
        """Move the sequence forward to value; never moves it back"""
        pass
