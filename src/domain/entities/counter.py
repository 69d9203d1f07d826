"""
Counter Entity

Named monotonically increasing sequence.
"""

from sqlmodel import Field, SQLModel

TASK_ID_COUNTER = "task_id"


class Counter(SQLModel, table=True):
    """
    Counter entity - value is the next number to hand out.

    The task_id counter is never decremented, so deleted or purged task
    ids are never issued again.
    """

    __tablename__ = "counters"

    name: str = Field(primary_key=True, max_length=64)
    value: int = Field(default=1)
