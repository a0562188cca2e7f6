# ==============================================================================
# PERMISSION SERVICE
# ==============================================================================

from __future__ import annotations

from access_admin.domain_models import Permission
from access_admin.schemas import PermissionDto
from access_admin.services import mappers
from access_admin.services.base_service import BaseService


class PermissionService(BaseService[Permission, PermissionDto]):
    """Business operations for permissions."""

    entity_name = "Permission"
    required_field = "name"

    def _to_dto(self, entity: Permission) -> PermissionDto:
        return mappers.permission_to_dto(entity)

    def _to_entity(self, dto: PermissionDto) -> Permission:
        return mappers.permission_from_dto(dto)
