# ==============================================================================
# SQLALCHEMY REPOSITORY - ORM Data Access
# ==============================================================================
# Generic repository over any registered model, backed by an adapter
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from access_admin.core.constants import DatabaseConstants
from access_admin.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from access_admin.database.repositories.base_repository import (
    BaseRepository,
    ModelType,
)
from access_admin.domain_models.base import is_valid_id


class SQLAlchemyRepository(BaseRepository[ModelType]):
    """
    ORM repository usable with every domain model.

    Statements are issued through the adapter's table registry, so the
    repository only knows the model and the adapter.

    Attributes:
        _adapter: Connected SQLAlchemy adapter
        _collection_name: Registered table name of the model
    """

    def __init__(
        self,
        adapter: SQLAlchemyAdapter,
        model: Type[ModelType],
    ) -> None:
        super().__init__(model)
        self._adapter = adapter
        self._collection_name = model.__tablename__

    def _live_filters(self, **filters: Any) -> Dict[str, Any]:
        if self.supports_soft_delete:
            filters[DatabaseConstants.SOFT_DELETE_COLUMN] = False
        return filters

    # ==========================================================================
    # READS
    # ==========================================================================

    async def list(self, include_deleted: bool = False) -> List[ModelType]:
        filters = None if include_deleted else self._live_filters()
        return await self._adapter.get_all(self._collection_name, filters=filters)

    async def get_by_id(
        self,
        id: int,
        include_deleted: bool = False,
    ) -> Optional[ModelType]:
        self._check_id(id)
        entity = await self._adapter.get_by_id(self._collection_name, id)
        if entity is None:
            return None
        if not include_deleted and getattr(entity, DatabaseConstants.SOFT_DELETE_COLUMN, False):
            return None
        return entity

    async def exists(self, id: int) -> bool:
        if not is_valid_id(id):
            return False
        return await self._adapter.exists(
            self._collection_name,
            self._live_filters(id=id),
        )

    async def find_one(
        self,
        include_deleted: bool = False,
        **filters: Any,
    ) -> Optional[ModelType]:
        """
        Find the first row matching column equality filters.

        Example:
            >>> await repo.find_one(rol_id=1, user_id=2)
        """
        if not include_deleted:
            filters = self._live_filters(**filters)
        return await self._adapter.find_one(self._collection_name, filters)

    # ==========================================================================
    # WRITES
    # ==========================================================================

    async def create(self, entity: ModelType) -> ModelType:
        data = {
            name: getattr(entity, name)
            for name in self.model.column_names()
            if name != "id"
        }
        # Let column defaults fill anything left unset
        data = {key: value for key, value in data.items() if value is not None}
        if self.supports_soft_delete:
            data[DatabaseConstants.SOFT_DELETE_COLUMN] = False
        return await self._adapter.create(self._collection_name, data)

    async def update(self, entity: ModelType) -> bool:
        self._check_id(entity.id)
        data = {name: getattr(entity, name) for name in self._mutable_columns()}
        affected = await self._adapter.bulk_update(
            self._collection_name,
            self._live_filters(id=entity.id),
            data,
        )
        return affected > 0

    async def delete_hard(self, id: int) -> bool:
        self._check_id(id)
        return await self._adapter.delete(self._collection_name, id)

    async def delete_soft(self, id: int) -> bool:
        self._check_id(id)
        self._check_soft_delete()
        affected = await self._adapter.bulk_update(
            self._collection_name,
            self._live_filters(id=id),
            {DatabaseConstants.SOFT_DELETE_COLUMN: True},
        )
        return affected > 0
