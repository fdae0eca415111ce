"""Task ORM — a to-do item owned by exactly one User.

Invariants:
    - owner_id FK to users.id, non-nullable, never reassigned after insert
    - title is non-nullable; description, city, weather optional in storage
    - status is one of TaskStatus values, default Pending
    - weather is derived from city by the weather lookup, never user-supplied

Design Decisions:
    - ON DELETE CASCADE on owner_id: user deletion is not implemented, but the
      schema already guarantees no orphaned tasks if it ever is
    - updated_at refreshed by the ORM on every UPDATE (onupdate)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskapi.core.domain_types import TaskStatus
from taskapi.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """Task entity — all reads and writes scoped by owner_id."""
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskStatus.PENDING.value,
    )
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    weather: Mapped[str | None] = mapped_column(String(200), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    owner: Mapped["User"] = relationship("User", back_populates="tasks")
