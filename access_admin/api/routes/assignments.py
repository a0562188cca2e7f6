# ==============================================================================
# ASSIGNMENT ENDPOINTS - Junction Entities
# ==============================================================================

from __future__ import annotations

from access_admin.api.crud_router import build_crud_router
from access_admin.api.dependencies import (
    get_module_form_service,
    get_rol_form_permission_service,
    get_rol_user_service,
)
from access_admin.schemas import ModuleFormDto, RolFormPermissionDto, RolUserDto

rol_user_router = build_crud_router("RolUser", RolUserDto, get_rol_user_service)
module_form_router = build_crud_router("ModuleForm", ModuleFormDto, get_module_form_service)

# Grants carry no logical delete flag
rol_form_permission_router = build_crud_router(
    "RolFormPermission",
    RolFormPermissionDto,
    get_rol_form_permission_service,
    soft_delete=False,
)
