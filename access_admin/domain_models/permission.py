# ==============================================================================
# PERMISSION MODEL - Grantable Actions
# ==============================================================================

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from access_admin.core.constants import DatabaseConstants
from access_admin.domain_models.base import SQLBase, SoftDeleteMixin


class Permission(SQLBase, SoftDeleteMixin):
    """Action (read, write, ...) a role may hold on a form."""

    __tablename__ = DatabaseConstants.PERMISSION_TABLE

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Permission(id={self.id}, name={self.name})>"
