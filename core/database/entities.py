"""
Database entities - SQLAlchemy 2.0 style.

The ``password`` column only ever holds a bcrypt hash once flushed: assigning
a plaintext to ``User.password`` marks it modified and the flush hooks below
hash it. Flushes where the password has no net change leave the hash alone.
"""
import enum
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, event, inspect
from sqlalchemy.orm import Mapped, mapped_column

from core.database.db import Base
from core.utils.passwords import hash_password


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRole(str, enum.Enum):
    STANDARD = "user"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(254), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255))
    phone_number: Mapped[Optional[str]] = mapped_column(String(32))
    role: Mapped[str] = mapped_column(String(20), default=UserRole.STANDARD.value, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"


def password_modified(user: User) -> bool:
    """True when the password attribute changed since the last load or flush."""
    return inspect(user).attrs.password.history.has_changes()


@event.listens_for(User, "before_insert")
def _hash_password_on_insert(mapper, connection, target: User) -> None:
    target.password = hash_password(target.password)


@event.listens_for(User, "before_update")
def _hash_password_on_update(mapper, connection, target: User) -> None:
    if password_modified(target):
        target.password = hash_password(target.password)
