# ==============================================================================
# FORM SCHEMAS
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from access_admin.schemas.base import BaseSchema


class FormDto(BaseSchema):
    """UI screen as exchanged over the API."""

    id: Optional[int] = Field(None, description="Form identifier")
    name: Optional[str] = Field(
        None,
        description="Form name (mandatory)",
        examples=["Users"],
    )
    description: Optional[str] = Field(None, description="Free text")
    date_created: Optional[datetime] = Field(
        None,
        description="Creation time, set by the server when omitted",
    )
    status: Optional[bool] = Field(None, description="Active flag, true when omitted")
    is_deleted: bool = Field(False, description="Logical delete flag")
