"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel

from src.app.use_cases.base_dto import CamelModel, UtcDateTime


# ============================================================================
# Response DTOs
# ============================================================================


class MessageResponse(BaseModel):
    """Plain acknowledgement used by the OTP and password flows"""

    message: str


class LoginResponse(CamelModel):
    """Response for user login use case"""

    message: str
    username: str
    email: str
    created_at: UtcDateTime
