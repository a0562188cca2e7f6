# ==============================================================================
# FORM SQL REPOSITORY - Raw Parameterized SQL per Provider
# ==============================================================================
# Form rows are read and written with hand-written SQL rendered by the
# dialect of whichever provider the request resolved
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import bindparam, text
from sqlalchemy.sql.elements import TextClause

from access_admin.core.constants import DatabaseConstants
from access_admin.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from access_admin.database.dialects import SqlDialect
from access_admin.database.repositories.base_repository import BaseRepository
from access_admin.domain_models.base import as_utc, is_valid_id, utc_now
from access_admin.domain_models.form import Form

logger = logging.getLogger(__name__)


class FormSqlRepository(BaseRepository[Form]):
    """
    Form repository issuing raw SQL through an adapter.

    Bound parameters carry the column types of the `form` table, and
    result columns are typed the same way, so datetimes and booleans
    convert identically on every driver.

    Attributes:
        _adapter: Connected adapter of the selected provider
        _dialect: Statement renderer for that provider

    Example:
        >>> repo = FormSqlRepository(adapter, dialect_for(DatabaseProvider.MYSQL))
        >>> form = await repo.create(Form(name="Users"))
    """

    def __init__(
        self,
        adapter: SQLAlchemyAdapter,
        dialect: SqlDialect,
    ) -> None:
        super().__init__(Form)
        self._adapter = adapter
        self._dialect = dialect
        self._table = DatabaseConstants.FORM_TABLE
        self._columns = list(Form.column_names())

    @property
    def provider(self):
        return self._dialect.provider

    # --------------------------------------------------------------------------
    # STATEMENT HELPERS
    # --------------------------------------------------------------------------

    def _statement(self, sql: str, params: Sequence[str]) -> TextClause:
        """Wrap SQL in text() with typed bind parameters."""
        columns = Form.__table__.c
        return text(sql).bindparams(
            *(bindparam(name, type_=columns[name].type) for name in params)
        )

    def _select(self, sql: str, params: Sequence[str] = ()) -> Any:
        return self._statement(sql, params).columns(
            *(Form.__table__.c[name] for name in self._columns)
        )

    @staticmethod
    def _to_entity(row: Dict[str, Any]) -> Form:
        return Form(**row)

    # --------------------------------------------------------------------------
    # READS
    # --------------------------------------------------------------------------

    async def list(self, include_deleted: bool = False) -> List[Form]:
        sql = self._dialect.select_all(self._table, self._columns, include_deleted)
        rows = await self._adapter.execute_raw(self._select(sql))
        return [self._to_entity(row) for row in rows]

    async def get_by_id(
        self,
        id: int,
        include_deleted: bool = False,
    ) -> Optional[Form]:
        self._check_id(id)
        sql = self._dialect.select_by_id(self._table, self._columns, include_deleted)
        rows = await self._adapter.execute_raw(self._select(sql, ["id"]), {"id": id})
        return self._to_entity(rows[0]) if rows else None

    async def exists(self, id: int) -> bool:
        if not is_valid_id(id):
            return False
        sql = self._dialect.count_live(self._table)
        rows = await self._adapter.execute_raw(self._statement(sql, ["id"]), {"id": id})
        return bool(rows) and rows[0]["total"] > 0

    # --------------------------------------------------------------------------
    # WRITES
    # --------------------------------------------------------------------------

    async def create(self, entity: Form) -> Form:
        values = {
            "name": entity.name,
            "description": entity.description,
            "date_created": as_utc(entity.date_created) or utc_now(),
            "status": True if entity.status is None else entity.status,
            DatabaseConstants.SOFT_DELETE_COLUMN: False,
        }
        columns = list(values)
        sql = self._dialect.insert(self._table, columns)
        statement = self._statement(sql, columns)

        if self._dialect.returns_inserted_id:
            rows = await self._adapter.execute_raw(statement, values)
            new_id = rows[0]["id"]
        else:
            result = await self._adapter.execute_write(statement, values)
            new_id = result.lastrowid

        logger.debug(f"Inserted form {new_id} via {self.provider.value}")
        # Return what the database stored, not what was bound
        return await self.get_by_id(new_id, include_deleted=True)

    async def update(self, entity: Form) -> bool:
        self._check_id(entity.id)
        columns = self._mutable_columns()
        sql = self._dialect.update(self._table, columns)
        params = {name: getattr(entity, name) for name in columns}
        params["id"] = entity.id
        result = await self._adapter.execute_write(
            self._statement(sql, [*columns, "id"]),
            params,
        )
        return result.rowcount > 0

    async def delete_hard(self, id: int) -> bool:
        self._check_id(id)
        result = await self._adapter.execute_write(
            self._statement(self._dialect.delete(self._table), ["id"]),
            {"id": id},
        )
        return result.rowcount > 0

    async def delete_soft(self, id: int) -> bool:
        self._check_id(id)
        result = await self._adapter.execute_write(
            self._statement(self._dialect.soft_delete(self._table), ["id"]),
            {"id": id},
        )
        return result.rowcount > 0
