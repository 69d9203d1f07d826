"""
Request Password Reset Use Case

Issues a password reset OTP by email.
"""

from libs.result import Error, Result, Return
from src.app.services.mailer import IMailer
from src.app.services.otp_service import deliver_otp, issue_otp
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import OtpPurpose
from .dtos import MessageResponse

RESET_SUBJECT = "Your GlowTasks password reset code"
GENERIC_RESPONSE = "If this email exists, an OTP has been sent."


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset code.

    Business Rules:
    - No email enumeration: unknown emails get the same success response
    - Known emails are subject to the OTP cooldown and send quota
    - Delivery is best-effort
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, email: str) -> Result[MessageResponse]:
        if not email:
            return Return.err(Error("MISSING_FIELDS", "Email is required"))

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.ok(MessageResponse(message=GENERIC_RESPONSE))

            issued = issue_otp(user, OtpPurpose.reset)
            if issued.is_err():
                return Return.err(issued.error)

            await self.uow.users.update(user)
            await self.uow.commit()

        await deliver_otp(self.mailer, email, RESET_SUBJECT, issued.value)

        return Return.ok(MessageResponse(message=GENERIC_RESPONSE))
