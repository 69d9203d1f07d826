"""
User Entity

Represents a person who owns a task list.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - one account, one private task list.

    Business Rules:
    - Username and email are each unique across all users
    - Password stored as bcrypt hash
    - Login requires verified = True
    - Each OTP purpose (verification, reset) keeps its own code, expiry,
      attempt counter, send counter and last-send timestamp
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    verified: bool = Field(default=False)

    # Signup verification OTP
    verification_otp: Optional[str] = Field(default=None, max_length=6)
    verification_otp_expires: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    verification_otp_attempts: int = Field(default=0)
    verification_otp_sent_count: int = Field(default=0)
    last_verification_otp_sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Password reset OTP
    reset_otp: Optional[str] = Field(default=None, max_length=6)
    reset_otp_expires: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    reset_otp_attempts: int = Field(default=0)
    reset_otp_sent_count: int = Field(default=0)
    last_reset_otp_sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
