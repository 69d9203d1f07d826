"""
GlowTasks Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class OtpPurpose(str, Enum):
    """What a one-time code unlocks"""

    verification = "verification"
    reset = "reset"
