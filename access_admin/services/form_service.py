# ==============================================================================
# FORM SERVICE
# ==============================================================================
# The repository is built per request for the provider selected at that
# moment; see api/dependencies.py
# ==============================================================================

from __future__ import annotations

import logging

from access_admin.core.settings import DatabaseProvider
from access_admin.domain_models import Form
from access_admin.database.repositories.form_sql_repository import FormSqlRepository
from access_admin.schemas import FormDto
from access_admin.services import mappers
from access_admin.services.base_service import BaseService

logger = logging.getLogger(__name__)


class FormService(BaseService[Form, FormDto]):
    """
    Business operations for forms.

    Attributes:
        provider: Provider the request's repository targets
    """

    entity_name = "Form"
    required_field = "name"

    def __init__(self, repository: FormSqlRepository) -> None:
        super().__init__(repository)
        self.provider: DatabaseProvider = repository.provider
        logger.debug(f"Form service bound to {self.provider.value}")

    def _to_dto(self, entity: Form) -> FormDto:
        return mappers.form_to_dto(entity)

    def _to_entity(self, dto: FormDto) -> Form:
        return mappers.form_from_dto(dto)
