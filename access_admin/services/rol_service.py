# ==============================================================================
# ROL SERVICE
# ==============================================================================

from __future__ import annotations

from access_admin.domain_models import Rol
from access_admin.schemas import RolDto
from access_admin.services import mappers
from access_admin.services.base_service import BaseService


class RolService(BaseService[Rol, RolDto]):
    """Business operations for roles."""

    entity_name = "Rol"
    required_field = "role"

    def _to_dto(self, entity: Rol) -> RolDto:
        return mappers.rol_to_dto(entity)

    def _to_entity(self, dto: RolDto) -> Rol:
        return mappers.rol_from_dto(dto)
