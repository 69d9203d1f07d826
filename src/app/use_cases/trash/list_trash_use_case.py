"""
List Trash Use Case

Returns recoverable tasks, purging expired ones first.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.dtos import TrashEntryResponse
from src.domain.base import utcnow

logger = logging.getLogger(__name__)

TRASH_RETENTION = timedelta(days=2)


class ListTrashUseCase:
    """
    Use case for reading the trash.

    Business Rules:
    - Entries with now - deleted_at >= 2 days are deleted permanently
    - The purge is committed before returning, only when something expired
    - Remaining entries come back in deletion order
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, username: str, now: Optional[datetime] = None
    ) -> Result[List[TrashEntryResponse]]:
        now = now or utcnow()

        async with self.uow:
            entries = await self.uow.trash.list_by_username(username)

            kept = []
            expired = []
            for entry in entries:
                if now - entry.deleted_at >= TRASH_RETENTION:
                    expired.append(entry)
                else:
                    kept.append(entry)

            if expired:
                for entry in expired:
                    await self.uow.trash.delete(entry)
                await self.uow.commit()
                logger.info(f"Purged {len(expired)} expired trash entries for {username}")

            return Return.ok([TrashEntryResponse.from_entity(entry) for entry in kept])
