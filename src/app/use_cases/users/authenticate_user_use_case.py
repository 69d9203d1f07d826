"""
Authenticate User Use Case

Resolves the x-user header to an existing account.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork


class AuthenticateUserUseCase:
    """
    Session gate: possession of an existing username is the only credential.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: Optional[str]) -> Result[str]:
        if not username:
            return Return.err(Error("MISSING_USER_HEADER", "Missing x-user header"))

        async with self.uow:
            user = await self.uow.users.get_by_username(username)
            if user is None:
                return Return.err(Error("INVALID_USER", "Invalid user"))

            return Return.ok(user.username)
