# ==============================================================================
# MODULE MODEL - Groups of Forms
# ==============================================================================

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from access_admin.core.constants import DatabaseConstants
from access_admin.domain_models.base import SQLBase, SoftDeleteMixin


class Module(SQLBase, SoftDeleteMixin):
    """Application module grouping forms."""

    __tablename__ = DatabaseConstants.MODULE_TABLE

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Module(id={self.id}, name={self.name})>"
