# ==============================================================================
# API DEPENDENCIES - Dependency Injection
# ==============================================================================
# FastAPI dependencies for database access and per-entity services
# ==============================================================================

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request

from access_admin.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from access_admin.database.dialects import dialect_for
from access_admin.database.factory import DatabaseFactory
from access_admin.database.form_provider import FormProviderSelector
from access_admin.database.repositories.form_sql_repository import FormSqlRepository
from access_admin.database.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)
from access_admin.domain_models import (
    Form,
    Module,
    ModuleForm,
    Permission,
    Person,
    Rol,
    RolFormPermission,
    RolUser,
    User,
)
from access_admin.services import (
    FormService,
    ModuleFormService,
    ModuleService,
    PermissionService,
    PersonService,
    RolFormPermissionService,
    RolService,
    RolUserService,
    UserService,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# DATABASE DEPENDENCIES
# ==============================================================================

async def get_adapter() -> SQLAlchemyAdapter:
    """
    Get database adapter dependency.

    Returns the initialized adapter of the configured provider.
    """
    return DatabaseFactory.get_adapter()


# Annotated type for database adapter
DatabaseDep = Annotated[SQLAlchemyAdapter, Depends(get_adapter)]


async def get_form_provider_selector(request: Request) -> FormProviderSelector:
    """Get the process-wide Form provider selector."""
    return request.app.state.form_provider


FormProviderDep = Annotated[FormProviderSelector, Depends(get_form_provider_selector)]


# ==============================================================================
# SERVICE DEPENDENCIES
# ==============================================================================

async def get_person_service(adapter: DatabaseDep) -> PersonService:
    """Get person service instance."""
    return PersonService(SQLAlchemyRepository(adapter, Person))


async def get_user_service(adapter: DatabaseDep) -> UserService:
    """Get user service instance."""
    return UserService(
        SQLAlchemyRepository(adapter, User),
        person_repository=SQLAlchemyRepository(adapter, Person),
    )


async def get_rol_service(adapter: DatabaseDep) -> RolService:
    """Get role service instance."""
    return RolService(SQLAlchemyRepository(adapter, Rol))


async def get_permission_service(adapter: DatabaseDep) -> PermissionService:
    """Get permission service instance."""
    return PermissionService(SQLAlchemyRepository(adapter, Permission))


async def get_module_service(adapter: DatabaseDep) -> ModuleService:
    """Get module service instance."""
    return ModuleService(SQLAlchemyRepository(adapter, Module))


async def get_form_service(selector: FormProviderDep) -> FormService:
    """
    Get form service instance.

    The provider is read once here; the request keeps this repository
    even if the provider is switched while it runs.
    """
    provider = selector.current
    adapter = await DatabaseFactory.get_or_initialize(provider)
    return FormService(FormSqlRepository(adapter, dialect_for(provider)))


async def get_rol_user_service(adapter: DatabaseDep) -> RolUserService:
    """Get role assignment service instance."""
    return RolUserService(
        SQLAlchemyRepository(adapter, RolUser),
        rol_repository=SQLAlchemyRepository(adapter, Rol),
        user_repository=SQLAlchemyRepository(adapter, User),
    )


async def get_module_form_service(adapter: DatabaseDep) -> ModuleFormService:
    """Get module membership service instance."""
    return ModuleFormService(
        SQLAlchemyRepository(adapter, ModuleForm),
        form_repository=SQLAlchemyRepository(adapter, Form),
        module_repository=SQLAlchemyRepository(adapter, Module),
    )


async def get_rol_form_permission_service(
    adapter: DatabaseDep,
) -> RolFormPermissionService:
    """Get permission grant service instance."""
    return RolFormPermissionService(
        SQLAlchemyRepository(adapter, RolFormPermission),
        rol_repository=SQLAlchemyRepository(adapter, Rol),
        form_repository=SQLAlchemyRepository(adapter, Form),
        permission_repository=SQLAlchemyRepository(adapter, Permission),
    )


# Annotated service types
FormServiceDep = Annotated[FormService, Depends(get_form_service)]
