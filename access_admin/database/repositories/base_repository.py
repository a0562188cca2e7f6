# ==============================================================================
# BASE REPOSITORY - Generic Data Access Abstraction
# ==============================================================================
# Repository Pattern contract shared by the ORM and raw SQL implementations
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar

from access_admin.core.constants import ErrorMessages
from access_admin.core.exceptions import ValidationError
from access_admin.domain_models.base import SQLBase, is_valid_id

# Type variable for generic repository
ModelType = TypeVar("ModelType", bound=SQLBase)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Abstract base repository providing the uniform CRUD contract.

    Every entity exposes the same operations whatever the storage path
    behind them. "Live" rows are rows whose logical delete flag is not
    set; models without the flag only have live rows.

    Generic Parameters:
        ModelType: SQLAlchemy model handled by the repository

    Attributes:
        model: Model class
        entity_name: Display name used in messages

    Example:
        >>> repo = SQLAlchemyRepository(adapter, Rol)
        >>> rol = await repo.create(Rol(role="Admin"))
        >>> await repo.delete_soft(rol.id)
        True
    """

    def __init__(self, model: Type[ModelType]) -> None:
        self.model = model
        self.entity_name = model.__name__

    @property
    def supports_soft_delete(self) -> bool:
        return self.model.supports_soft_delete()

    def _check_id(self, id: int) -> None:
        """
        Reject ids no row can have before touching storage.

        Raises:
            ValidationError: If id is not a positive 64-bit integer
        """
        if not is_valid_id(id):
            raise ValidationError(
                ErrorMessages.INVALID_ID.format(entity=self.entity_name),
                field="id",
            )

    def _check_soft_delete(self) -> None:
        if not self.supports_soft_delete:
            raise ValidationError(
                ErrorMessages.SOFT_DELETE_UNSUPPORTED.format(entity=self.entity_name)
            )

    def _mutable_columns(self) -> List[str]:
        """Columns a full-row update writes."""
        return [
            name for name in self.model.column_names()
            if name not in self.model.immutable_fields
        ]

    # ==========================================================================
    # ABSTRACT METHODS - Must be implemented by subclasses
    # ==========================================================================

    @abstractmethod
    async def list(self, include_deleted: bool = False) -> List[ModelType]:
        """
        List rows ordered by id.

        Args:
            include_deleted: Also return logically deleted rows
        """
        pass

    @abstractmethod
    async def get_by_id(
        self,
        id: int,
        include_deleted: bool = False,
    ) -> Optional[ModelType]:
        """
        Retrieve a row by id.

        Returns:
            Entity if a matching row exists, None otherwise

        Raises:
            ValidationError: If id is not positive
        """
        pass

    @abstractmethod
    async def create(self, entity: ModelType) -> ModelType:
        """
        Insert a row.

        The logical delete flag is always stored as false.

        Returns:
            Entity with its generated id
        """
        pass

    @abstractmethod
    async def update(self, entity: ModelType) -> bool:
        """
        Overwrite the mutable columns of the live row with `entity.id`.

        Returns:
            True if a row was affected
        """
        pass

    @abstractmethod
    async def delete_hard(self, id: int) -> bool:
        """
        Physically remove a row.

        Returns:
            True if a row was removed
        """
        pass

    @abstractmethod
    async def delete_soft(self, id: int) -> bool:
        """
        Set the logical delete flag of a live row.

        Returns:
            True if a row was affected

        Raises:
            ValidationError: If the model has no logical delete flag
        """
        pass

    @abstractmethod
    async def exists(self, id: int) -> bool:
        """Check whether a live row with the id exists."""
        pass
