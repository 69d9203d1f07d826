"""
Load Profile Use Case

Loads the public profile of the current user.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.base_dto import CamelModel, UtcDateTime


class ProfileResponse(CamelModel):
    """Response DTO for LoadProfileUseCase"""

    username: str
    email: str
    created_at: UtcDateTime
    verified: bool


class LoadProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_username(username)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                ProfileResponse(
                    username=user.username,
                    email=user.email,
                    created_at=user.created_at,
                    verified=user.verified,
                )
            )
