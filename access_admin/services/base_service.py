# ==============================================================================
# BASE SERVICE - Generic Business Logic Layer
# ==============================================================================
# Validation, DTO/entity mapping, logging and error wrapping around a
# repository
# ==============================================================================

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, List, Optional, TypeVar

from access_admin.core.constants import ErrorMessages, SuccessMessages
from access_admin.core.exceptions import (
    EntityNotFoundError,
    ExternalServiceError,
    ValidationError,
)
from access_admin.database.repositories.base_repository import BaseRepository
from access_admin.domain_models.base import is_valid_id
from access_admin.schemas.base import BaseSchema

logger = logging.getLogger(__name__)

# Type variables for generic service
EntityType = TypeVar("EntityType")
DtoType = TypeVar("DtoType", bound=BaseSchema)


class BaseService(ABC, Generic[EntityType, DtoType]):
    """
    Abstract base service providing the standard business operations.

    Every operation runs inside `_operation`, which logs the outcome and
    converts unexpected failures into `ExternalServiceError`.
    `ValidationError` and `EntityNotFoundError` pass through unchanged.

    Generic Parameters:
        EntityType: SQLAlchemy model handled by the repository
        DtoType: Pydantic DTO exchanged with the API

    Class Attributes:
        entity_name: Display name used in messages and logs
        required_field: DTO field that must be non-blank, if any

    Attributes:
        _repository: Repository for the entity

    Example:
        >>> class RolService(BaseService[Rol, RolDto]):
        ...     entity_name = "Rol"
        ...     required_field = "role"
        ...     def _to_dto(self, entity): return rol_to_dto(entity)
        ...     def _to_entity(self, dto): return rol_from_dto(dto)
    """

    entity_name: str = "Entity"
    required_field: Optional[str] = None

    def __init__(self, repository: BaseRepository[EntityType]) -> None:
        """
        Initialize service.

        Args:
            repository: Repository for the entity
        """
        self._repository = repository

    # ==========================================================================
    # ABSTRACT METHODS
    # ==========================================================================

    @abstractmethod
    def _to_dto(self, entity: EntityType) -> DtoType:
        """Convert entity to DTO."""
        pass

    @abstractmethod
    def _to_entity(self, dto: DtoType) -> EntityType:
        """Convert DTO to entity."""
        pass

    # ==========================================================================
    # HOOKS - Overridden by entity services
    # ==========================================================================

    async def _present(self, entity: EntityType) -> DtoType:
        """Build the response DTO for one entity."""
        return self._to_dto(entity)

    async def _present_many(self, entities: List[EntityType]) -> List[DtoType]:
        return [await self._present(entity) for entity in entities]

    async def _validate_references(self, dto: DtoType) -> None:
        """Check that referenced rows exist; no-op for plain entities."""
        return None

    async def _entity_for_create(self, dto: DtoType) -> EntityType:
        return self._to_entity(dto)

    async def _entity_for_update(self, dto: DtoType) -> EntityType:
        return self._to_entity(dto)

    # ==========================================================================
    # VALIDATION
    # ==========================================================================

    def _validate_id(self, id: Optional[int]) -> None:
        if not is_valid_id(id):
            raise ValidationError(
                ErrorMessages.INVALID_ID.format(entity=self.entity_name),
                field="id",
            )

    def _validate_dto(self, dto: Optional[DtoType]) -> None:
        """
        Fail fast on an absent DTO or a blank mandatory field.

        Raises:
            ValidationError: If validation fails
        """
        if dto is None:
            raise ValidationError(
                ErrorMessages.NULL_PAYLOAD.format(entity=self.entity_name)
            )
        if self.required_field is None:
            return
        value = getattr(dto, self.required_field, None)
        if value is None or not str(value).strip():
            alias = type(dto).model_fields[self.required_field].alias or self.required_field
            raise ValidationError(
                ErrorMessages.REQUIRED_FIELD.format(field=alias, entity=self.entity_name),
                field=alias,
            )

    # ==========================================================================
    # ERROR HANDLING
    # ==========================================================================

    @asynccontextmanager
    async def _operation(self, failure_message: str) -> AsyncIterator[None]:
        """
        Log and classify failures of one service operation.

        Args:
            failure_message: Message of the ExternalServiceError raised
                when something unexpected fails
        """
        try:
            yield
        except ValidationError as exc:
            logger.warning(f"{self.entity_name} validation failed: {exc.message}")
            raise
        except EntityNotFoundError as exc:
            logger.info(exc.message)
            raise
        except Exception as exc:
            logger.error(f"{failure_message}: {exc}", exc_info=True)
            raise ExternalServiceError(
                service="database",
                message=failure_message,
                cause=exc,
            ) from exc

    def _not_found(self, id: int) -> EntityNotFoundError:
        return EntityNotFoundError(self.entity_name, id)

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def list(self, include_deleted: bool = False) -> List[DtoType]:
        """
        List entities.

        Args:
            include_deleted: Also return logically deleted rows
        """
        async with self._operation(
            ErrorMessages.LIST_FAILED.format(entity=self.entity_name)
        ):
            entities = await self._repository.list(include_deleted=include_deleted)
            result = await self._present_many(entities)
        logger.info(f"Listed {len(result)} {self.entity_name} records")
        return result

    async def get_by_id(self, id: int) -> DtoType:
        """
        Retrieve an entity by id.

        Raises:
            ValidationError: If id is not positive
            EntityNotFoundError: If no live row matches
        """
        async with self._operation(
            ErrorMessages.GET_FAILED.format(entity=self.entity_name, id=id)
        ):
            self._validate_id(id)
            entity = await self._repository.get_by_id(id)
            if entity is None:
                raise self._not_found(id)
            result = await self._present(entity)
        logger.info(f"Retrieved {self.entity_name} {id}")
        return result

    async def create(self, dto: Optional[DtoType]) -> DtoType:
        """
        Validate and persist a new entity.

        Returns:
            The stored entity with its generated id
        """
        async with self._operation(
            ErrorMessages.CREATE_FAILED.format(entity=self.entity_name)
        ):
            self._validate_dto(dto)
            await self._validate_references(dto)
            entity = await self._entity_for_create(dto)
            created = await self._repository.create(entity)
            result = await self._present(created)
        logger.info(f"Created {self.entity_name} {result.id}")
        return result

    async def update(self, dto: Optional[DtoType], id: Optional[int] = None) -> DtoType:
        """
        Replace the mutable fields of an entity.

        Args:
            dto: New values
            id: Target id; overrides the id carried in the DTO

        Raises:
            EntityNotFoundError: If no live row has the id
        """
        target = id if id is not None else getattr(dto, "id", None)
        async with self._operation(
            ErrorMessages.UPDATE_FAILED.format(entity=self.entity_name, id=target)
        ):
            self._validate_dto(dto)
            self._validate_id(target)
            dto = dto.model_copy(update={"id": target})
            await self._validate_references(dto)
            entity = await self._entity_for_update(dto)
            if not await self._repository.update(entity):
                raise self._not_found(target)
            updated = await self._repository.get_by_id(target)
            if updated is None:
                raise self._not_found(target)
            result = await self._present(updated)
        logger.info(f"Updated {self.entity_name} {target}")
        return result

    async def delete(self, id: int) -> str:
        """
        Physically delete an entity.

        Returns:
            Confirmation message
        """
        async with self._operation(
            ErrorMessages.DELETE_FAILED.format(entity=self.entity_name, id=id)
        ):
            self._validate_id(id)
            if not await self._repository.delete_hard(id):
                raise self._not_found(id)
        logger.info(f"Deleted {self.entity_name} {id}")
        return SuccessMessages.DELETED.format(entity=self.entity_name, id=id)

    async def delete_logical(self, id: int) -> str:
        """
        Flag an entity as deleted.

        Returns:
            Confirmation message

        Raises:
            ValidationError: If the entity has no logical delete flag
            EntityNotFoundError: If no live row has the id
        """
        async with self._operation(
            ErrorMessages.DELETE_FAILED.format(entity=self.entity_name, id=id)
        ):
            self._validate_id(id)
            if not await self._repository.delete_soft(id):
                raise self._not_found(id)
        logger.info(f"Logically deleted {self.entity_name} {id}")
        return SuccessMessages.LOGICALLY_DELETED.format(entity=self.entity_name, id=id)
