"""
Task Entity

A to-do item owned by exactly one user.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Task(SQLModel, table=True):
    """
    Task entity - one item on a user's list.

    Business Rules:
    - id comes from the global task_id counter and is never reused
    - row_id only orders the list: a restored task gets a new row_id
      and therefore lands at the end
    - No cross-user visibility: every lookup is scoped by username
    """

    __tablename__ = "tasks"

    row_id: Optional[int] = Field(default=None, primary_key=True)
    id: int = Field(unique=True, index=True)
    username: str = Field(foreign_key="users.username", max_length=255)

    title: str
    description: str = Field(default="")
    completed: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_task_username", "username"),)
