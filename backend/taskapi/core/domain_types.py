"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, TaskId wrap UUIDs — never use bare UUID in domain logic
    - Task status values encoded as an Enum — no raw string matching

Design Decisions:
    - NewType wrappers, str Enum values identical to the DB `status` column
    - Malformed ids parse to None; callers treat them as missing rows
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
TaskId = NewType("TaskId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task lifecycle states — maps to DB `status` column."""
    PENDING = "Pending"
    IN_PROGRESS = "In-Progress"
    COMPLETED = "Completed"


# ─── Constants ───────────────────────────────────────────────────

WEATHER_FALLBACK = "Weather data unavailable"


def parse_uuid(raw: str) -> UUID | None:
    """Parse an opaque identifier, returning None when it is not a UUID."""
    try:
        return UUID(str(raw))
    except (ValueError, AttributeError, TypeError):
        return None
