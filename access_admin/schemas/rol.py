# ==============================================================================
# ROL SCHEMAS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from access_admin.schemas.base import BaseSchema


class RolDto(BaseSchema):
    """Role as exchanged over the API."""

    id: Optional[int] = Field(None, description="Role identifier")
    role: Optional[str] = Field(
        None,
        description="Role name (mandatory)",
        examples=["Admin"],
    )
    description: Optional[str] = Field(None, description="Free text")
    is_deleted: bool = Field(False, description="Logical delete flag")
