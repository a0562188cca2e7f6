# ==============================================================================
# ROL MODEL - Roles
# ==============================================================================

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from access_admin.core.constants import DatabaseConstants
from access_admin.domain_models.base import SQLBase, SoftDeleteMixin


class Rol(SQLBase, SoftDeleteMixin):
    """Role granted to users and holding form permissions."""

    __tablename__ = DatabaseConstants.ROL_TABLE

    role: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Rol(id={self.id}, role={self.role})>"
