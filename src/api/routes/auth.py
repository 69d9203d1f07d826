from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.api.error import raise_for_error
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    ResendVerificationUseCase,
    VerifyOtpUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    LoginResponse,
    MessageResponse,
)
from src.depends import get_mailer, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])

OTP_ERRORS = {"INVALID_OTP", "OTP_NOT_ISSUED", "OTP_EXPIRED", "INCORRECT_OTP", "TOO_MANY_ATTEMPTS"}


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Presence of each field is checked by the use case so a missing field
    gets the same 400 as any other registration failure.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


@router.post("/register", status_code=status.HTTP_200_OK, response_model=RegisterResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    User Registration

    Creates an unverified account and emails a 6-digit verification code.

    Raises:
        - 400 Bad Request: Missing field, username or email taken
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        username=request.username, email=request.email, password=request.password
    )

    result = await RegisterUseCase(uow, mailer).execute(command)

    if result.is_err():
        raise_for_error(result.error, {"MISSING_FIELDS", "USERNAME_TAKEN", "EMAIL_TAKEN"})

    return result.value


class EmailRequest(BaseModel):
    email: Optional[str] = None


@router.post("/resend-verify", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def resend_verify(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    Resend Verification Code

    Raises:
        - 400 Bad Request: Unknown email or already verified
        - 429 Too Many Requests: Cooldown (Retry-After set) or send quota used up
    """
    result = await ResendVerificationUseCase(uow, mailer).execute(request.email)

    if result.is_err():
        raise_for_error(
            result.error,
            {"MISSING_FIELDS", "USER_NOT_FOUND", "ALREADY_VERIFIED", "COOLDOWN", "RATE_LIMITED"},
        )

    return result.value


class OtpRequest(BaseModel):
    """otp may arrive as a JSON number; it is compared as a string"""

    email: Optional[str] = None
    otp: Optional[str] = None

    @field_validator("otp", mode="before")
    @classmethod
    def coerce_numeric_otp(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


@router.post("/verify-otp", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def verify_otp(request: OtpRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Verify Signup Code

    Raises:
        - 400 Bad Request: Missing field, unknown email, no code, expired or incorrect code
        - 429 Too Many Requests: 5 incorrect attempts against the current code
    """
    result = await VerifyOtpUseCase(uow).execute(request.email, request.otp)

    if result.is_err():
        raise_for_error(result.error, {"MISSING_FIELDS"} | OTP_ERRORS)

    return result.value


class LoginRequest(BaseModel):
    """Identifier is a username or an email"""

    identifier: Optional[str] = None
    password: Optional[str] = None


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 400 Bad Request: Missing identifier or password
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Email not verified
    """
    result = await LoginUseCase(uow).execute(request.identifier, request.password)

    if result.is_err():
        raise_for_error(
            result.error, {"MISSING_FIELDS", "INVALID_CREDENTIALS", "EMAIL_NOT_VERIFIED"}
        )

    return result.value


@router.post("/forgot", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    Request Password Reset Code

    Security:
        - No email enumeration (same response for known and unknown emails)

    Raises:
        - 429 Too Many Requests: Cooldown or send quota used up
    """
    result = await RequestPasswordResetUseCase(uow, mailer).execute(request.email)

    if result.is_err():
        raise_for_error(result.error, {"MISSING_FIELDS", "COOLDOWN", "RATE_LIMITED"})

    return result.value


class ResetPasswordRequest(OtpRequest):
    model_config = ConfigDict(populate_by_name=True)

    new_password: Optional[str] = Field(default=None, alias="newPassword")


@router.post("/reset", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Confirm Password Reset

    Raises:
        - 400 Bad Request: Missing field, unknown email, no code, expired or incorrect code
        - 429 Too Many Requests: 5 incorrect attempts against the current code
    """
    result = await ConfirmPasswordResetUseCase(uow).execute(
        request.email, request.otp, request.new_password
    )

    if result.is_err():
        raise_for_error(result.error, {"MISSING_FIELDS"} | OTP_ERRORS)

    return result.value
