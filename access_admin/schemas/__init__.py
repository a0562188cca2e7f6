# ==============================================================================
# SCHEMAS PACKAGE INITIALIZATION
# ==============================================================================

"""
Pydantic Schemas
================

Request/response DTOs. Keys are camelCase on the wire and bind
case-insensitively on input.
"""

from access_admin.schemas.base import (
    BaseSchema,
    HealthResponse,
    MessageResponse,
    ProviderResponse,
)
from access_admin.schemas.person import PersonDto
from access_admin.schemas.user import UserDto
from access_admin.schemas.rol import RolDto
from access_admin.schemas.permission import PermissionDto
from access_admin.schemas.form import FormDto
from access_admin.schemas.module import ModuleDto
from access_admin.schemas.assignments import (
    ModuleFormDto,
    RolFormPermissionDto,
    RolUserDto,
)

__all__ = [
    "BaseSchema",
    "HealthResponse",
    "MessageResponse",
    "ProviderResponse",
    "PersonDto",
    "UserDto",
    "RolDto",
    "PermissionDto",
    "FormDto",
    "ModuleDto",
    "RolUserDto",
    "ModuleFormDto",
    "RolFormPermissionDto",
]
