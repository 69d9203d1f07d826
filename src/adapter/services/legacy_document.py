"""
Legacy JSON document

The file-backed version of the app kept everything in one JSON document:

    {"users": [...], "tasksByUser": {username: [...]},
     "trashByUser": {username: [...]}, "nextTaskId": int}

This module reads and writes that layout and moves it in and out of the
database through a unit of work.
"""

import json
import logging
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import format_utc, utcnow
from src.domain.entities import TASK_ID_COUNTER, Task, TrashEntry, User

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def empty_document() -> Dict[str, Any]:
    return {"users": [], "tasksByUser": {}, "trashByUser": {}, "nextTaskId": 1}


def read_document(path: PathLike) -> Dict[str, Any]:
    """Missing or unreadable files yield empty defaults for every collection."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            parsed = json.load(f)
    except FileNotFoundError:
        return empty_document()
    except (OSError, ValueError) as exc:
        logger.warning(f"Ignoring unreadable data file {path}: {exc}")
        return empty_document()

    if not isinstance(parsed, dict):
        logger.warning(f"Ignoring data file {path}: top level is not an object")
        return empty_document()

    return {
        "users": parsed.get("users") or [],
        "tasksByUser": parsed.get("tasksByUser") or {},
        "trashByUser": parsed.get("trashByUser") or {},
        "nextTaskId": parsed.get("nextTaskId") or 1,
    }


def write_document(path: PathLike, document: Dict[str, Any]) -> None:
    """Write to a temp file beside path, then rename over it."""
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp = tempfile.mkstemp(dir=directory, prefix=".data-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def _format_time(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return format_utc(value)


def _user_from_record(record: Dict[str, Any]) -> User:
    return User(
        username=record["username"],
        email=record["email"],
        password_hash=record.get("password", ""),
        # Accounts created before OTP verification existed carry no flag
        verified=record.get("verified") is not False,
        verification_otp=record.get("verificationOtp"),
        verification_otp_expires=_parse_time(record.get("verificationOtpExpires")),
        verification_otp_attempts=record.get("verificationOtpAttempts") or 0,
        verification_otp_sent_count=record.get("verificationOtpSentCount") or 0,
        last_verification_otp_sent_at=_parse_time(record.get("lastVerificationOtpSentAt")),
        reset_otp=record.get("resetOtp"),
        reset_otp_expires=_parse_time(record.get("resetOtpExpires")),
        reset_otp_attempts=record.get("resetOtpAttempts") or 0,
        reset_otp_sent_count=record.get("resetOtpSentCount") or 0,
        last_reset_otp_sent_at=_parse_time(record.get("lastResetOtpSentAt")),
        created_at=_parse_time(record.get("createdAt")) or utcnow(),
    )


def _user_to_record(user: User) -> Dict[str, Any]:
    return {
        "username": user.username,
        "email": user.email,
        "password": user.password_hash,
        "createdAt": _format_time(user.created_at),
        "verified": user.verified,
        "verificationOtp": user.verification_otp,
        "verificationOtpExpires": _format_time(user.verification_otp_expires),
        "verificationOtpAttempts": user.verification_otp_attempts,
        "verificationOtpSentCount": user.verification_otp_sent_count,
        "lastVerificationOtpSentAt": _format_time(user.last_verification_otp_sent_at),
        "resetOtp": user.reset_otp,
        "resetOtpExpires": _format_time(user.reset_otp_expires),
        "resetOtpAttempts": user.reset_otp_attempts,
        "resetOtpSentCount": user.reset_otp_sent_count,
        "lastResetOtpSentAt": _format_time(user.last_reset_otp_sent_at),
    }


def _task_fields(username: str, record: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": int(record["id"]),
        "username": username,
        "title": record.get("title") or "",
        "description": record.get("description") or "",
        "completed": bool(record.get("completed", False)),
        "created_at": _parse_time(record.get("createdAt")) or utcnow(),
    }


def _task_to_record(task: Union[Task, TrashEntry]) -> Dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "completed": task.completed,
        "createdAt": _format_time(task.created_at),
    }


async def import_document(uow: UnitOfWork, document: Dict[str, Any]) -> int:
    """
    Load a legacy document into the database in one transaction.

    Tasks and trash of unknown users are skipped. The task id counter is moved
    past both nextTaskId and the highest imported id.

    Returns:
        Number of users imported
    """
    async with uow:
        usernames = set()
        highest_id = 0

        for record in document.get("users", []):
            user = _user_from_record(record)
            await uow.users.create(user)
            usernames.add(user.username)

        for username, records in document.get("tasksByUser", {}).items():
            if username not in usernames:
                logger.warning(f"Skipping tasks of unknown user {username}")
                continue
            for record in records:
                task = Task(**_task_fields(username, record))
                await uow.tasks.create(task)
                highest_id = max(highest_id, task.id)

        for username, records in document.get("trashByUser", {}).items():
            if username not in usernames:
                logger.warning(f"Skipping trash of unknown user {username}")
                continue
            for record in records:
                entry = TrashEntry(
                    **_task_fields(username, record),
                    deleted_at=_parse_time(record.get("deletedAt")) or utcnow(),
                )
                await uow.trash.create(entry)
                highest_id = max(highest_id, entry.id)

        next_task_id = max(int(document.get("nextTaskId") or 1), highest_id + 1)
        await uow.counters.advance_to(TASK_ID_COUNTER, next_task_id)
        await uow.commit()

    logger.info(f"Imported {len(usernames)} users from legacy document")
    return len(usernames)


async def export_document(uow: UnitOfWork) -> Dict[str, Any]:
    """Snapshot the database in the legacy layout."""
    document = empty_document()

    async with uow:
        users = await uow.users.list_all()
        for user in users:
            document["users"].append(_user_to_record(user))
            tasks = await uow.tasks.list_by_username(user.username)
            document["tasksByUser"][user.username] = [_task_to_record(t) for t in tasks]
            trash = await uow.trash.list_by_username(user.username)
            document["trashByUser"][user.username] = [
                {**_task_to_record(e), "deletedAt": _format_time(e.deleted_at)} for e in trash
            ]
        document["nextTaskId"] = await uow.counters.peek(TASK_ID_COUNTER)

    return document


async def import_legacy_file(uow: UnitOfWork, path: PathLike) -> int:
    """
    Import path into an empty database. A database that already has users is
    left untouched.
    """
    async with uow:
        existing = await uow.users.count()
    if existing:
        logger.info(f"Database already populated; skipping import of {path}")
        return 0

    return await import_document(uow, read_document(path))


async def export_legacy_file(uow: UnitOfWork, path: PathLike) -> None:
    write_document(path, await export_document(uow))
