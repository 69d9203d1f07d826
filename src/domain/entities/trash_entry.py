"""
TrashEntry Entity

Soft-deleted task kept for a limited retention window.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class TrashEntry(SQLModel, table=True):
    """
    TrashEntry entity - snapshot of a deleted task plus deleted_at.

    Business Rules:
    - Retention window is 2 days from deleted_at
    - Expired entries are purged the next time the owner reads the trash
    - Restore turns the entry back into a Task with the same id
    """

    __tablename__ = "trash_entries"

    row_id: Optional[int] = Field(default=None, primary_key=True)
    id: int = Field(index=True)
    username: str = Field(foreign_key="users.username", max_length=255)

    title: str
    description: str = Field(default="")
    completed: bool = Field(default=False)

    created_at: datetime = Field(sa_column=Column(DateTime))
    deleted_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_trash_username", "username"),
        Index("idx_trash_deleted_at", "deleted_at"),
    )
