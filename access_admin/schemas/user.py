# ==============================================================================
# USER SCHEMAS - Login Accounts
# ==============================================================================
# Request/Response schema for user management
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from access_admin.schemas.base import BaseSchema


class UserDto(BaseSchema):
    """
    User account.

    The password is accepted on input and hashed before storage; it is
    never serialized back to clients. On update a blank password keeps
    the stored hash.
    """

    id: Optional[int] = Field(None, description="User identifier")
    user_name: Optional[str] = Field(
        None,
        description="Login name (mandatory)",
        examples=["ana.garcia"],
    )
    password: Optional[str] = Field(
        None,
        exclude=True,
        description="Plaintext password, write-only",
    )
    email: Optional[str] = Field(None, description="Contact email")
    registration_date: Optional[datetime] = Field(
        None,
        description="Account creation time, set by the server when omitted",
    )
    person_id: Optional[int] = Field(None, description="Owning person")
    is_deleted: bool = Field(False, description="Logical delete flag")
