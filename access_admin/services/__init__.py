# ==============================================================================
# SERVICES PACKAGE INITIALIZATION
# ==============================================================================

"""
Business Services
=================

One service per entity: validation, DTO/entity mapping, logging and
error wrapping around the repositories.
"""

from access_admin.services.base_service import BaseService
from access_admin.services.person_service import PersonService
from access_admin.services.user_service import UserService
from access_admin.services.rol_service import RolService
from access_admin.services.permission_service import PermissionService
from access_admin.services.form_service import FormService
from access_admin.services.module_service import ModuleService
from access_admin.services.assignment_service import (
    ModuleFormService,
    RolFormPermissionService,
    RolUserService,
)

__all__ = [
    "BaseService",
    "PersonService",
    "UserService",
    "RolService",
    "PermissionService",
    "FormService",
    "ModuleService",
    "RolUserService",
    "ModuleFormService",
    "RolFormPermissionService",
]
