from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from src.domain.base import format_utc

# Stored timestamps are naive UTC; on the wire they always carry the Z suffix
UtcDateTime = Annotated[datetime, PlainSerializer(format_utc, return_type=str, when_used="json")]


class CamelModel(BaseModel):
    """DTO that serializes with camelCase keys (createdAt, deletedAt, ...)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
