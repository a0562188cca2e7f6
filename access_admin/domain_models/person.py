# ==============================================================================
# PERSON MODEL - Natural Person Records
# ==============================================================================
# A person owns zero or more user accounts
# ==============================================================================

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from access_admin.core.constants import DatabaseConstants
from access_admin.domain_models.base import SQLBase, SoftDeleteMixin


class Person(SQLBase, SoftDeleteMixin):
    """
    Person owning user accounts.

    Attributes:
        name: Given name (mandatory)
        last_name: Family name
        phone: Contact phone number, stored as entered
    """

    __tablename__ = DatabaseConstants.PERSON_TABLE

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name={self.name})>"
