# ==============================================================================
# ASSIGNMENT SCHEMAS - Junction DTOs
# ==============================================================================
# Parent display names are filled in by the services on reads and are
# ignored on writes
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from access_admin.schemas.base import BaseSchema


class RolUserDto(BaseSchema):
    """Role assigned to a user."""

    id: Optional[int] = Field(None, description="Assignment identifier")
    rol_id: Optional[int] = Field(None, description="Assigned role")
    rol_name: Optional[str] = Field(None, description="Role name, read-only")
    user_id: Optional[int] = Field(None, description="Receiving user")
    user_name: Optional[str] = Field(None, description="User login name, read-only")
    is_deleted: bool = Field(False, description="Logical delete flag")


class ModuleFormDto(BaseSchema):
    """Form placed in a module."""

    id: Optional[int] = Field(None, description="Membership identifier")
    form_id: Optional[int] = Field(None, description="Member form")
    form_name: Optional[str] = Field(None, description="Form name, read-only")
    module_id: Optional[int] = Field(None, description="Containing module")
    module_name: Optional[str] = Field(None, description="Module name, read-only")
    is_deleted: bool = Field(False, description="Logical delete flag")


class RolFormPermissionDto(BaseSchema):
    """Permission a role holds on a form."""

    id: Optional[int] = Field(None, description="Grant identifier")
    rol_id: Optional[int] = Field(None, description="Granted role")
    rol_name: Optional[str] = Field(None, description="Role name, read-only")
    form_id: Optional[int] = Field(None, description="Target form")
    form_name: Optional[str] = Field(None, description="Form name, read-only")
    permission_id: Optional[int] = Field(None, description="Granted permission")
    permission_name: Optional[str] = Field(
        None,
        description="Permission name, read-only",
    )
