"""
Resend Verification Code Use Case

Issues a new signup verification OTP to an unverified user.
"""

from libs.result import Error, Result, Return
from src.app.services.mailer import IMailer
from src.app.services.otp_service import deliver_otp, issue_otp
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import OtpPurpose
from .dtos import MessageResponse
from .register_use_case import VERIFICATION_SUBJECT


class ResendVerificationUseCase:
    """
    Use case for resending the signup verification code.

    Business Rules:
    - Unknown email and already-verified accounts are rejected
    - New code replaces the old one (invalidates previous)
    - 60 second cooldown between sends, at most 5 sends
    - Delivery is best-effort; the code is valid even if mail fails
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, email: str) -> Result[MessageResponse]:
        """
        Errors:
            - MISSING_FIELDS: email absent
            - USER_NOT_FOUND: no account for email
            - ALREADY_VERIFIED: nothing to verify
            - COOLDOWN / RATE_LIMITED: from the OTP lifecycle
        """
        if not email:
            return Return.err(Error("MISSING_FIELDS", "Email is required"))

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "No account with this email"))

            if user.verified:
                return Return.err(Error("ALREADY_VERIFIED", "Email is already verified"))

            issued = issue_otp(user, OtpPurpose.verification)
            if issued.is_err():
                return Return.err(issued.error)

            await self.uow.users.update(user)
            await self.uow.commit()

        await deliver_otp(self.mailer, email, VERIFICATION_SUBJECT, issued.value)

        return Return.ok(MessageResponse(message="A new verification code has been sent."))
