"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (business intent)
- RegisterResponse: Output from use case (structured result)
"""

from typing import Optional
from pydantic import BaseModel


class RegisterCommand(BaseModel):
    """
    Register command - represents signup intent

    Fields stay optional here: presence is a business rule checked by the
    use case, not an HTTP concern.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(BaseModel):
    """Register response - the email the verification code went to"""

    message: str
    email: str
