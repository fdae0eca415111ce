"""Task Schemas — Pydantic models with field-level validation for task endpoints.

Invariants:
    - TaskCreate: title, description, city all required, stripped, non-empty
    - TaskUpdate: every field optional; empty strings are accepted and ignored
      downstream (presence semantics)
    - Unknown body fields (owner_id, weather, ...) are ignored, never persisted
    - TaskResponse timestamps are always timezone-aware UTC

Design Decisions:
    - Strings stripped in field validators before length checks apply downstream
    - from_attributes on TaskResponse: built straight from the ORM row
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskapi.core.domain_types import TaskStatus


class TaskCreate(BaseModel):
    """Task creation — all three fields required."""
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=10_000)
    city: str = Field(min_length=1, max_length=100)

    @field_validator("title", "description", "city")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v


class TaskUpdate(BaseModel):
    """Partial update — a field is applied only when present and non-empty."""
    title: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=10_000)
    city: str | None = Field(None, max_length=100)
    status: TaskStatus | None = None

    @field_validator("title", "description", "city")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return v.strip() if isinstance(v, str) else v


class TaskResponse(BaseModel):
    """Task response — public-facing task data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    title: str
    description: str | None = None
    status: TaskStatus
    city: str | None = None
    weather: str | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite drops tzinfo on read
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
