# ==============================================================================
# MAPPERS - DTO <-> Entity Conversion
# ==============================================================================
# Pure functions, one pair per entity; no storage access
# ==============================================================================

from __future__ import annotations

from typing import Optional

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
from access_admin.domain_models.base import as_utc
from access_admin.schemas import (
    FormDto,
    ModuleDto,
    ModuleFormDto,
    PermissionDto,
    PersonDto,
    RolDto,
    RolFormPermissionDto,
    RolUserDto,
    UserDto,
)


def _flag(value: Optional[bool], default: bool = True) -> bool:
    return default if value is None else value


# ==============================================================================
# PERSON
# ==============================================================================

def person_to_dto(entity: Person) -> PersonDto:
    return PersonDto(
        id=entity.id,
        name=entity.name,
        last_name=entity.last_name,
        phone=entity.phone,
        is_deleted=bool(entity.is_deleted),
    )


def person_from_dto(dto: PersonDto) -> Person:
    return Person(
        id=dto.id,
        name=dto.name,
        last_name=dto.last_name,
        phone=dto.phone,
    )


# ==============================================================================
# USER
# ==============================================================================

def user_to_dto(entity: User) -> UserDto:
    """Map a user; the stored hash is never copied to the DTO."""
    return UserDto(
        id=entity.id,
        user_name=entity.username,
        email=entity.email,
        registration_date=entity.registration_date,
        person_id=entity.person_id,
        is_deleted=bool(entity.is_deleted),
    )


def user_from_dto(dto: UserDto, password_hash: Optional[str] = None) -> User:
    """
    Map a user DTO to an entity.

    Args:
        dto: Incoming user
        password_hash: Hash to store; the plaintext in the DTO is ignored
    """
    return User(
        id=dto.id,
        username=dto.user_name,
        password=password_hash,
        email=dto.email,
        registration_date=as_utc(dto.registration_date),
        person_id=dto.person_id,
    )


# ==============================================================================
# ROL / PERMISSION
# ==============================================================================

def rol_to_dto(entity: Rol) -> RolDto:
    return RolDto(
        id=entity.id,
        role=entity.role,
        description=entity.description,
        is_deleted=bool(entity.is_deleted),
    )


def rol_from_dto(dto: RolDto) -> Rol:
    return Rol(id=dto.id, role=dto.role, description=dto.description)


def permission_to_dto(entity: Permission) -> PermissionDto:
    return PermissionDto(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        is_deleted=bool(entity.is_deleted),
    )


def permission_from_dto(dto: PermissionDto) -> Permission:
    return Permission(id=dto.id, name=dto.name, description=dto.description)


# ==============================================================================
# FORM / MODULE
# ==============================================================================

def form_to_dto(entity: Form) -> FormDto:
    return FormDto(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        date_created=entity.date_created,
        status=entity.status,
        is_deleted=bool(entity.is_deleted),
    )


def form_from_dto(dto: FormDto) -> Form:
    return Form(
        id=dto.id,
        name=dto.name,
        description=dto.description,
        date_created=as_utc(dto.date_created),
        status=_flag(dto.status),
    )


def module_to_dto(entity: Module) -> ModuleDto:
    return ModuleDto(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        status=entity.status,
        is_deleted=bool(entity.is_deleted),
    )


def module_from_dto(dto: ModuleDto) -> Module:
    return Module(
        id=dto.id,
        name=dto.name,
        description=dto.description,
        status=_flag(dto.status),
    )


# ==============================================================================
# JUNCTIONS
# ==============================================================================
# Display names are looked up by the services and passed in

def rol_user_to_dto(
    entity: RolUser,
    rol_name: Optional[str] = None,
    user_name: Optional[str] = None,
) -> RolUserDto:
    return RolUserDto(
        id=entity.id,
        rol_id=entity.rol_id,
        rol_name=rol_name,
        user_id=entity.user_id,
        user_name=user_name,
        is_deleted=bool(entity.is_deleted),
    )


def rol_user_from_dto(dto: RolUserDto) -> RolUser:
    return RolUser(id=dto.id, rol_id=dto.rol_id, user_id=dto.user_id)


def module_form_to_dto(
    entity: ModuleForm,
    form_name: Optional[str] = None,
    module_name: Optional[str] = None,
) -> ModuleFormDto:
    return ModuleFormDto(
        id=entity.id,
        form_id=entity.form_id,
        form_name=form_name,
        module_id=entity.module_id,
        module_name=module_name,
        is_deleted=bool(entity.is_deleted),
    )


def module_form_from_dto(dto: ModuleFormDto) -> ModuleForm:
    return ModuleForm(id=dto.id, form_id=dto.form_id, module_id=dto.module_id)


def rol_form_permission_to_dto(
    entity: RolFormPermission,
    rol_name: Optional[str] = None,
    form_name: Optional[str] = None,
    permission_name: Optional[str] = None,
) -> RolFormPermissionDto:
    return RolFormPermissionDto(
        id=entity.id,
        rol_id=entity.rol_id,
        rol_name=rol_name,
        form_id=entity.form_id,
        form_name=form_name,
        permission_id=entity.permission_id,
        permission_name=permission_name,
    )


def rol_form_permission_from_dto(dto: RolFormPermissionDto) -> RolFormPermission:
    return RolFormPermission(
        id=dto.id,
        rol_id=dto.rol_id,
        form_id=dto.form_id,
        permission_id=dto.permission_id,
    )
