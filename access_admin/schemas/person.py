# ==============================================================================
# PERSON SCHEMAS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from access_admin.schemas.base import BaseSchema


class PersonDto(BaseSchema):
    """Person as exchanged over the API."""

    id: Optional[int] = Field(None, description="Person identifier")
    name: Optional[str] = Field(
        None,
        description="Given name (mandatory)",
        examples=["Ana"],
    )
    last_name: Optional[str] = Field(None, description="Family name")
    phone: Optional[str] = Field(None, description="Contact phone")
    is_deleted: bool = Field(False, description="Logical delete flag")
