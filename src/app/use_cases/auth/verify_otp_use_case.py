"""
Verify Signup OTP Use Case

Marks an account verified when the submitted code matches.
"""

from libs.result import Error, Result, Return
from src.app.services.otp_service import verify_otp
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import OtpPurpose
from .dtos import MessageResponse


class VerifyOtpUseCase:
    """
    Use case for signup verification.

    Business Rules:
    - Already verified users return success without touching OTP state,
      even when a stale code is still stored
    - Code must exist, be unexpired, and have fewer than 5 wrong attempts
    - A wrong code is counted and persisted
    - Success sets verified = True and clears the code
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, otp: str) -> Result[MessageResponse]:
        """
        Execute signup verification.

        Errors:
            - MISSING_FIELDS: email or otp absent
            - INVALID_OTP: unknown email
            - OTP_NOT_ISSUED, OTP_EXPIRED, TOO_MANY_ATTEMPTS, INCORRECT_OTP
        """
        if not email or not otp:
            return Return.err(Error("MISSING_FIELDS", "Email and OTP are required"))

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("INVALID_OTP", "Invalid email or OTP"))

            if user.verified:
                return Return.ok(MessageResponse(message="Already verified"))

            result = verify_otp(user, OtpPurpose.verification, otp)
            if result.is_err():
                if result.error.code == "INCORRECT_OTP":
                    await self.uow.users.update(user)
                    await self.uow.commit()
                return Return.err(result.error)

            await self.uow.users.update(user)
            await self.uow.commit()

        return Return.ok(MessageResponse(message="Email verified successfully"))
