"""User ORM — persists credentials for signup/login.

Invariants:
    - id is UUID primary key (generated on insert)
    - email is unique (DB index) and stored lower-cased
    - password_hash is a bcrypt digest, never the raw password
    - Users are never mutated or deleted by this system

Design Decisions:
    - Uniqueness enforced by the store, not by a pre-check query: the
      IntegrityError on commit is the single source of truth (no race window)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskapi.db.base import Base


class User(Base):
    """User account — owns zero or more Tasks."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="owner",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
