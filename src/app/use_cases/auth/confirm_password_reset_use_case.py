"""
Confirm Password Reset Use Case

Sets a new password when the reset OTP matches.
"""

from libs.result import Error, Result, Return
from src.app.services.otp_service import verify_otp
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import OtpPurpose
from .dtos import MessageResponse


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Same OTP checks as signup verification, on the reset code
    - A wrong code is counted and persisted
    - No password strength policy
    - Password is hashed with bcrypt and the reset code cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, email: str, otp: str, new_password: str
    ) -> Result[MessageResponse]:
        """
        Execute confirm password reset use case.

        Errors:
            - MISSING_FIELDS: email, otp or new password absent
            - INVALID_OTP: unknown email
            - OTP_NOT_ISSUED, OTP_EXPIRED, TOO_MANY_ATTEMPTS, INCORRECT_OTP
        """
        if not email or not otp or not new_password:
            return Return.err(
                Error("MISSING_FIELDS", "Email, OTP and new password are required")
            )

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("INVALID_OTP", "Invalid email or OTP"))

            result = verify_otp(user, OtpPurpose.reset, otp)
            if result.is_err():
                if result.error.code == "INCORRECT_OTP":
                    await self.uow.users.update(user)
                    await self.uow.commit()
                return Return.err(result.error)

            user.password_hash = hash_password(new_password)
            await self.uow.users.update(user)
            await self.uow.commit()

        return Return.ok(MessageResponse(message="Password reset successful"))
