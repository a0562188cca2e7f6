# ==============================================================================
# PERMISSION SCHEMAS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from access_admin.schemas.base import BaseSchema


class PermissionDto(BaseSchema):
    """Permission as exchanged over the API."""

    id: Optional[int] = Field(None, description="Permission identifier")
    name: Optional[str] = Field(
        None,
        description="Permission name (mandatory)",
        examples=["Read"],
    )
    description: Optional[str] = Field(None, description="Free text")
    is_deleted: bool = Field(False, description="Logical delete flag")
