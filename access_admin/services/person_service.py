# ==============================================================================
# PERSON SERVICE
# ==============================================================================

from __future__ import annotations

from access_admin.domain_models import Person
from access_admin.schemas import PersonDto
from access_admin.services import mappers
from access_admin.services.base_service import BaseService


class PersonService(BaseService[Person, PersonDto]):
    """Business operations for people."""

    entity_name = "Person"
    required_field = "name"

    def _to_dto(self, entity: Person) -> PersonDto:
        return mappers.person_to_dto(entity)

    def _to_entity(self, dto: PersonDto) -> Person:
        return mappers.person_from_dto(dto)
