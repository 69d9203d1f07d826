"""
GlowTasks Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import OtpPurpose

# Export all entities
from .user import User
from .task import Task
from .trash_entry import TrashEntry
from .counter import Counter, TASK_ID_COUNTER

__all__ = [
    # Enums
    "OtpPurpose",
    # Entities
    "User",
    "Task",
    "TrashEntry",
    "Counter",
    # Counter names
    "TASK_ID_COUNTER",
]
