"""
Login Use Case

Authenticates by username or email and password.
"""

from libs.result import Error, Result, Return
from src.app.services.passwords import burn_password_check, verify_password
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Identifier is tried as username first, then as email
    - Password check runs even for unknown identifiers (timing)
    - Same error for unknown identifier and wrong password
    - Unverified accounts are refused after the password check
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identifier: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            identifier: Username or email
            password: Plain text password

        Returns:
            Result with LoginResponse, or Error
        """
        if not identifier or not password:
            return Return.err(
                Error("MISSING_FIELDS", "Identifier and password are required")
            )

        async with self.uow:
            user = await self.uow.users.get_by_identifier(identifier)

            if user is None:
                burn_password_check()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username/email or password")
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username/email or password")
                )

            if not user.verified:
                return Return.err(
                    Error(
                        "EMAIL_NOT_VERIFIED",
                        "Please verify your email before logging in.",
                    )
                )

            return Return.ok(
                LoginResponse(
                    message="Login successful",
                    username=user.username,
                    email=user.email,
                    created_at=user.created_at,
                )
            )
