"""
User Management Use Cases

All user-related business logic.
"""

from .authenticate_user_use_case import AuthenticateUserUseCase
from .load_profile_use_case import LoadProfileUseCase, ProfileResponse

__all__ = [
    "AuthenticateUserUseCase",
    "LoadProfileUseCase",
    "ProfileResponse",
]
