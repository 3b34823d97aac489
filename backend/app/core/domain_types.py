"""Domain Types — enums and identity types shared across the codebase.

Invariants:
    - Role and envelope status values are the exact strings stored / sent on the wire
    - Identity types wrap UUIDs: parsed payloads carry them, raw path strings never reach repositories

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
CourseId = NewType("CourseId", UUID)
SkillId = NewType("SkillId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """User roles — maps to DB `role` column."""
    USER = "USER"
    COACH = "COACH"
    ADMIN = "ADMIN"


class ResponseStatus(str, Enum):
    """Top-level `status` field of every response envelope."""
    SUCCESS = "success"
    FAILED = "failed"
    ERROR = "error"


class ServerState(str, Enum):
    """Bootstrap lifecycle: UNINITIALIZED -> CONNECTING -> LISTENING -> STOPPED."""
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    LISTENING = "listening"
    STOPPED = "stopped"
