"""
Register Use Case

Creates an unverified account and sends the first verification code.
"""

from libs.result import Error, Result, Return
from src.app.services.mailer import IMailer
from src.app.services.otp_service import deliver_otp, issue_otp
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import OtpPurpose, User
from .register_dto import RegisterCommand, RegisterResponse

VERIFICATION_SUBJECT = "Your GlowTasks verification code"


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand
    - Output: Result[RegisterResponse]

    Business Logic:
    1. Username, email and password are all required
    2. Username must be unused, then email must be unused
    3. Hash password with bcrypt
    4. Create User with verified=False and a fresh verification OTP
    5. Commit, then deliver the OTP (best-effort)
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Returns:
            Result[RegisterResponse], or Error

        Errors:
            - MISSING_FIELDS: username, email or password absent/empty
            - USERNAME_TAKEN: username already registered
            - EMAIL_TAKEN: email already registered
        """
        if not command.username or not command.email or not command.password:
            return Return.err(
                Error("MISSING_FIELDS", "Username, email and password are required")
            )

        async with self.uow:
            if await self.uow.users.get_by_username(command.username):
                return Return.err(Error("USERNAME_TAKEN", "Username already exists"))

            if await self.uow.users.get_by_email(command.email):
                return Return.err(Error("EMAIL_TAKEN", "Email already registered"))

            user = User(
                username=command.username,
                email=command.email,
                password_hash=hash_password(command.password),
                verified=False,
            )
            # A brand-new user has no send history, so issuing cannot fail
            code = issue_otp(user, OtpPurpose.verification).value

            await self.uow.users.create(user)
            await self.uow.commit()

        await deliver_otp(self.mailer, command.email, VERIFICATION_SUBJECT, code)

        return Return.ok(
            RegisterResponse(
                message="User created. Please verify using the OTP sent to your email.",
                email=command.email,
            )
        )
