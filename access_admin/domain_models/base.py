# ==============================================================================
# BASE MODEL - SQLAlchemy Foundation
# ==============================================================================
# Base declarative class and common mixins for all SQL models
# ==============================================================================

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy import Boolean, Integer, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from access_admin.core.constants import DatabaseConstants


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to UTC; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_valid_id(id: Optional[int]) -> bool:
    """Whether a value can be a stored primary key."""
    return id is not None and 0 < id <= DatabaseConstants.MAX_ID


class SQLBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides a common foundation with:
    - Integer surrogate key generated by the database
    - Soft-delete capability discovery

    Class Attributes:
        immutable_fields: Columns an update must never overwrite. Models
            with creation metadata extend this tuple.

    Example:
        >>> class Rol(SQLBase, SoftDeleteMixin):
        ...     __tablename__ = "rol"
        ...     role: Mapped[str] = mapped_column(String(100))
    """

    immutable_fields = ("id", DatabaseConstants.SOFT_DELETE_COLUMN)

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    @classmethod
    def supports_soft_delete(cls) -> bool:
        """Whether the model maps the logical delete flag."""
        return DatabaseConstants.SOFT_DELETE_COLUMN in cls.__table__.columns

    @classmethod
    def column_names(cls) -> Tuple[str, ...]:
        return tuple(column.name for column in cls.__table__.columns)

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        return f"<{class_name}(id={self.id})>"


class SoftDeleteMixin:
    """
    Mixin for soft delete functionality.

    Instead of physical deletion, records are flagged as deleted and
    hidden from regular listings.

    Attributes:
        is_deleted: Logical delete flag, always false on creation
    """

    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
        nullable=False,
    )
