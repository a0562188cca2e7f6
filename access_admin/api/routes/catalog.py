# ==============================================================================
# CATALOG ENDPOINTS - People, Accounts, Roles, Permissions, Modules
# ==============================================================================

from __future__ import annotations

from access_admin.api.crud_router import build_crud_router
from access_admin.api.dependencies import (
    get_module_service,
    get_permission_service,
    get_person_service,
    get_rol_service,
    get_user_service,
)
from access_admin.schemas import ModuleDto, PermissionDto, PersonDto, RolDto, UserDto

person_router = build_crud_router("Person", PersonDto, get_person_service)
user_router = build_crud_router("User", UserDto, get_user_service)
rol_router = build_crud_router("Rol", RolDto, get_rol_service)
permission_router = build_crud_router("Permission", PermissionDto, get_permission_service)
module_router = build_crud_router("Module", ModuleDto, get_module_service)
