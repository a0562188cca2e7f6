# ==============================================================================
# ASSIGNMENT SERVICES - Junction Entities
# ==============================================================================
# RolUser, ModuleForm and RolFormPermission: parent checks on writes and
# parent display names on reads
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional

from access_admin.core.constants import ErrorMessages
from access_admin.core.exceptions import ValidationError
from access_admin.domain_models import (
    Form,
    Module,
    ModuleForm,
    Permission,
    Rol,
    RolFormPermission,
    RolUser,
    User,
)
from access_admin.domain_models.base import is_valid_id
from access_admin.database.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)
from access_admin.schemas import ModuleFormDto, RolFormPermissionDto, RolUserDto
from access_admin.services import mappers
from access_admin.services.base_service import BaseService, DtoType, EntityType


class AssignmentService(BaseService[EntityType, DtoType]):
    """
    Base for junction services.

    Parents must be live rows when a junction row is written. Hard
    deletes of parents cascade in the database, so reads may still meet
    a logically deleted parent; its name is shown anyway.
    """

    async def _require_parent(
        self,
        repository: SQLAlchemyRepository[Any],
        parent_id: Optional[int],
        field: str,
    ) -> None:
        """
        Raises:
            ValidationError: If the id is not positive or has no live row
        """
        if not is_valid_id(parent_id):
            raise ValidationError(
                ErrorMessages.INVALID_ID.format(entity=repository.entity_name),
                field=field,
            )
        if not await repository.exists(parent_id):
            raise ValidationError(
                ErrorMessages.PARENT_NOT_FOUND.format(
                    entity=repository.entity_name,
                    id=parent_id,
                ),
                field=field,
            )

    @staticmethod
    async def _name_of(
        repository: SQLAlchemyRepository[Any],
        parent_id: int,
        attribute: str,
    ) -> Optional[str]:
        parent = await repository.get_by_id(parent_id, include_deleted=True)
        return getattr(parent, attribute) if parent is not None else None

    @staticmethod
    async def _name_index(
        repository: SQLAlchemyRepository[Any],
        attribute: str,
    ) -> Dict[int, str]:
        """Map every parent id to its display name with one query."""
        parents = await repository.list(include_deleted=True)
        return {parent.id: getattr(parent, attribute) for parent in parents}


# ==============================================================================
# ROL USER
# ==============================================================================

class RolUserService(AssignmentService[RolUser, RolUserDto]):
    """
    Role assignments of users.

    A (rolId, userId) pair may have at most one active assignment.
    """

    entity_name = "RolUser"

    def __init__(
        self,
        repository: SQLAlchemyRepository[RolUser],
        rol_repository: SQLAlchemyRepository[Rol],
        user_repository: SQLAlchemyRepository[User],
    ) -> None:
        super().__init__(repository)
        self._roles = rol_repository
        self._users = user_repository

    def _to_dto(self, entity: RolUser) -> RolUserDto:
        return mappers.rol_user_to_dto(entity)

    def _to_entity(self, dto: RolUserDto) -> RolUser:
        return mappers.rol_user_from_dto(dto)

    async def _validate_references(self, dto: RolUserDto) -> None:
        await self._require_parent(self._roles, dto.rol_id, "rolId")
        await self._require_parent(self._users, dto.user_id, "userId")

        existing = await self._repository.find_one(
            rol_id=dto.rol_id,
            user_id=dto.user_id,
        )
        if existing is not None and existing.id != dto.id:
            raise ValidationError(
                ErrorMessages.DUPLICATE_ASSIGNMENT.format(
                    rol_id=dto.rol_id,
                    user_id=dto.user_id,
                )
            )

    async def _present(self, entity: RolUser) -> RolUserDto:
        return mappers.rol_user_to_dto(
            entity,
            rol_name=await self._name_of(self._roles, entity.rol_id, "role"),
            user_name=await self._name_of(self._users, entity.user_id, "username"),
        )

    async def _present_many(self, entities: List[RolUser]) -> List[RolUserDto]:
        roles = await self._name_index(self._roles, "role")
        users = await self._name_index(self._users, "username")
        return [
            mappers.rol_user_to_dto(
                entity,
                rol_name=roles.get(entity.rol_id),
                user_name=users.get(entity.user_id),
            )
            for entity in entities
        ]


# ==============================================================================
# MODULE FORM
# ==============================================================================

class ModuleFormService(AssignmentService[ModuleForm, ModuleFormDto]):
    """Forms placed in modules."""

    entity_name = "ModuleForm"

    def __init__(
        self,
        repository: SQLAlchemyRepository[ModuleForm],
        form_repository: SQLAlchemyRepository[Form],
        module_repository: SQLAlchemyRepository[Module],
    ) -> None:
        super().__init__(repository)
        self._forms = form_repository
        self._modules = module_repository

    def _to_dto(self, entity: ModuleForm) -> ModuleFormDto:
        return mappers.module_form_to_dto(entity)

    def _to_entity(self, dto: ModuleFormDto) -> ModuleForm:
        return mappers.module_form_from_dto(dto)

    async def _validate_references(self, dto: ModuleFormDto) -> None:
        await self._require_parent(self._forms, dto.form_id, "formId")
        await self._require_parent(self._modules, dto.module_id, "moduleId")

    async def _present(self, entity: ModuleForm) -> ModuleFormDto:
        return mappers.module_form_to_dto(
            entity,
            form_name=await self._name_of(self._forms, entity.form_id, "name"),
            module_name=await self._name_of(self._modules, entity.module_id, "name"),
        )

    async def _present_many(self, entities: List[ModuleForm]) -> List[ModuleFormDto]:
        forms = await self._name_index(self._forms, "name")
        modules = await self._name_index(self._modules, "name")
        return [
            mappers.module_form_to_dto(
                entity,
                form_name=forms.get(entity.form_id),
                module_name=modules.get(entity.module_id),
            )
            for entity in entities
        ]


# ==============================================================================
# ROL FORM PERMISSION
# ==============================================================================

class RolFormPermissionService(
    AssignmentService[RolFormPermission, RolFormPermissionDto]
):
    """Permissions granted to roles on forms. Rows are only hard deleted."""

    entity_name = "RolFormPermission"

    def __init__(
        self,
        repository: SQLAlchemyRepository[RolFormPermission],
        rol_repository: SQLAlchemyRepository[Rol],
        form_repository: SQLAlchemyRepository[Form],
        permission_repository: SQLAlchemyRepository[Permission],
    ) -> None:
        super().__init__(repository)
        self._roles = rol_repository
        self._forms = form_repository
        self._permissions = permission_repository

    def _to_dto(self, entity: RolFormPermission) -> RolFormPermissionDto:
        return mappers.rol_form_permission_to_dto(entity)

    def _to_entity(self, dto: RolFormPermissionDto) -> RolFormPermission:
        return mappers.rol_form_permission_from_dto(dto)

    async def _validate_references(self, dto: RolFormPermissionDto) -> None:
        await self._require_parent(self._roles, dto.rol_id, "rolId")
        await self._require_parent(self._forms, dto.form_id, "formId")
        await self._require_parent(self._permissions, dto.permission_id, "permissionId")

    async def _present(self, entity: RolFormPermission) -> RolFormPermissionDto:
        return mappers.rol_form_permission_to_dto(
            entity,
            rol_name=await self._name_of(self._roles, entity.rol_id, "role"),
            form_name=await self._name_of(self._forms, entity.form_id, "name"),
            permission_name=await self._name_of(
                self._permissions, entity.permission_id, "name"
            ),
        )

    async def _present_many(
        self,
        entities: List[RolFormPermission],
    ) -> List[RolFormPermissionDto]:
        roles = await self._name_index(self._roles, "role")
        forms = await self._name_index(self._forms, "name")
        permissions = await self._name_index(self._permissions, "name")
        return [
            mappers.rol_form_permission_to_dto(
                entity,
                rol_name=roles.get(entity.rol_id),
                form_name=forms.get(entity.form_id),
                permission_name=permissions.get(entity.permission_id),
            )
            for entity in entities
        ]
