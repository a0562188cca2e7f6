# ==============================================================================
# MODULE SERVICE
# ==============================================================================

from __future__ import annotations

from access_admin.domain_models import Module
from access_admin.schemas import ModuleDto
from access_admin.services import mappers
from access_admin.services.base_service import BaseService


class ModuleService(BaseService[Module, ModuleDto]):
    """Business operations for modules."""

    entity_name = "Module"
    required_field = "name"

    def _to_dto(self, entity: Module) -> ModuleDto:
        return mappers.module_to_dto(entity)

    def _to_entity(self, dto: ModuleDto) -> Module:
        return mappers.module_from_dto(dto)
