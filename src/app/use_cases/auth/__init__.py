"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .register_dto import RegisterCommand, RegisterResponse
from .resend_verification_use_case import ResendVerificationUseCase
from .verify_otp_use_case import VerifyOtpUseCase
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import LoginResponse, MessageResponse

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "ResendVerificationUseCase",
    "VerifyOtpUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "MessageResponse",
]
