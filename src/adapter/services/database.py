import logging

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

# Importing the entities registers their tables on SQLModel.metadata
import src.domain.entities  # noqa: F401

logger = logging.getLogger(__name__)


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables; an absent database file starts out empty"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database schema ready")
