# ==============================================================================
# USER MODEL - Application Accounts
# ==============================================================================
# Login accounts; linked to roles through RolUser
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from access_admin.core.constants import DatabaseConstants
from access_admin.domain_models.base import SQLBase, SoftDeleteMixin, utc_now


class User(SQLBase, SoftDeleteMixin):
    """
    User account.

    Attributes:
        username: Login name (mandatory)
        password: Password hash, never the plaintext
        email: Contact email, not format-checked
        registration_date: Creation timestamp, preserved on update
        person_id: Optional owning Person
    """

    __tablename__ = DatabaseConstants.USER_TABLE

    immutable_fields = SQLBase.immutable_fields + ("registration_date",)

    username: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    person_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey(f"{DatabaseConstants.PERSON_TABLE}.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
