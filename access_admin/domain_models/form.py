# ==============================================================================
# FORM MODEL - UI Screens
# ==============================================================================
# Forms are grouped into modules and carry role permissions
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from access_admin.core.constants import DatabaseConstants
from access_admin.domain_models.base import SQLBase, SoftDeleteMixin, utc_now


class Form(SQLBase, SoftDeleteMixin):
    """
    UI screen.

    The same table is read and written by the ORM repository and by the
    raw SQL repository, so column names here are the SQL contract.

    Attributes:
        name: Display name (mandatory)
        description: Free text
        date_created: Creation timestamp, preserved on update
        status: Active flag shown in the UI
    """

    __tablename__ = DatabaseConstants.FORM_TABLE

    immutable_fields = SQLBase.immutable_fields + ("date_created",)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Form(id={self.id}, name={self.name})>"
