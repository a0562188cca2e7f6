# ==============================================================================
# ASSIGNMENT MODELS - Junction Tables
# ==============================================================================
# RolUser: Rol <-> User
# ModuleForm: Module <-> Form
# RolFormPermission: Rol x Form x Permission
# Parent rows deleted physically take their junction rows with them
# ==============================================================================

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from access_admin.core.constants import DatabaseConstants as Tables
from access_admin.domain_models.base import SQLBase, SoftDeleteMixin


def _parent_key(table: str) -> ForeignKey:
    return ForeignKey(f"{table}.id", ondelete="CASCADE")


class RolUser(SQLBase, SoftDeleteMixin):
    """
    Assignment of a role to a user.

    A (rol_id, user_id) pair has at most one active row; the service
    layer checks this before inserting.
    """

    __tablename__ = Tables.ROL_USER_TABLE

    rol_id: Mapped[int] = mapped_column(
        Integer, _parent_key(Tables.ROL_TABLE), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, _parent_key(Tables.USER_TABLE), nullable=False, index=True
    )


class ModuleForm(SQLBase, SoftDeleteMixin):
    """Membership of a form in a module."""

    __tablename__ = Tables.MODULE_FORM_TABLE

    form_id: Mapped[int] = mapped_column(
        Integer, _parent_key(Tables.FORM_TABLE), nullable=False, index=True
    )
    module_id: Mapped[int] = mapped_column(
        Integer, _parent_key(Tables.MODULE_TABLE), nullable=False, index=True
    )


class RolFormPermission(SQLBase):
    """
    Grant of a permission on a form to a role.

    Has no logical delete flag; rows are only removed physically.
    """

    __tablename__ = Tables.ROL_FORM_PERMISSION_TABLE

    rol_id: Mapped[int] = mapped_column(
        Integer, _parent_key(Tables.ROL_TABLE), nullable=False, index=True
    )
    form_id: Mapped[int] = mapped_column(
        Integer, _parent_key(Tables.FORM_TABLE), nullable=False, index=True
    )
    permission_id: Mapped[int] = mapped_column(
        Integer, _parent_key(Tables.PERMISSION_TABLE), nullable=False, index=True
    )
