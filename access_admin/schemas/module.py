# ==============================================================================
# MODULE SCHEMAS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from access_admin.schemas.base import BaseSchema


class ModuleDto(BaseSchema):
    """Application module as exchanged over the API."""

    id: Optional[int] = Field(None, description="Module identifier")
    name: Optional[str] = Field(
        None,
        description="Module name (mandatory)",
        examples=["Security"],
    )
    description: Optional[str] = Field(None, description="Free text")
    status: Optional[bool] = Field(None, description="Active flag, true when omitted")
    is_deleted: bool = Field(False, description="Logical delete flag")
