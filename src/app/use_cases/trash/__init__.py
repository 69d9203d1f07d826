"""
Trash Use Cases

Soft-deleted tasks with a 2-day retention window.
"""

from .list_trash_use_case import ListTrashUseCase, TRASH_RETENTION
from .restore_trash_use_case import RestoreTrashUseCase

__all__ = [
    "ListTrashUseCase",
    "RestoreTrashUseCase",
    "TRASH_RETENTION",
]
