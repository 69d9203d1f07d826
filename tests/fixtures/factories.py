from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.base import utcnow
from src.domain.entities import Task, TrashEntry, User

DEFAULT_PASSWORD = "TestPass123!"


def make_user(
    username: str = "alice",
    email: Optional[str] = None,
    password: str = DEFAULT_PASSWORD,
    verified: bool = True,
    **fields,
) -> User:
    # Low bcrypt cost keeps tests fast; checkpw reads the cost from the hash
    password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt(4)).decode()
    return User(
        username=username,
        email=email or f"{username}@example.com",
        password_hash=password_hash,
        verified=verified,
        **fields,
    )


def pending_otp_fields(
    prefix: str, code: str = "123456", expires_in: timedelta = timedelta(minutes=10), **extra
) -> dict:
    """OTP fields for a user holding an outstanding code, e.g. prefix='verification'"""
    now = utcnow()
    last_sent_key = f"last_{prefix}_otp_sent_at"
    fields = {
        f"{prefix}_otp": code,
        f"{prefix}_otp_expires": now + expires_in,
        f"{prefix}_otp_attempts": 0,
        f"{prefix}_otp_sent_count": 1,
        last_sent_key: now - timedelta(minutes=2),
    }
    fields.update(extra)
    return fields


async def create_user(db_session: AsyncSession, **kwargs) -> User:
    user = make_user(**kwargs)
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


async def create_trash_entry(
    db_session: AsyncSession,
    username: str,
    task_id: int,
    title: str = "Old task",
    deleted_at: Optional[datetime] = None,
) -> TrashEntry:
    entry = TrashEntry(
        id=task_id,
        username=username,
        title=title,
        description="",
        completed=False,
        created_at=utcnow() - timedelta(days=5),
        deleted_at=deleted_at or utcnow(),
    )
    db_session.add(entry)
    await db_session.commit()
    await db_session.refresh(entry)
    return entry


def make_task(task_id: int, username: str = "alice", title: str = "Task", **fields) -> Task:
    return Task(id=task_id, username=username, title=title, **fields)
