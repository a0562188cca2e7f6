# ==============================================================================
# SQL DIALECTS - Provider-Specific Statement Rendering
# ==============================================================================
# Hand-written SQL differs between engines only in identifier quoting,
# boolean literals and how a generated key is handed back after INSERT
# ==============================================================================

from __future__ import annotations

from typing import Dict, Sequence, Type

from access_admin.core.constants import DatabaseConstants
from access_admin.core.settings import DatabaseProvider


class SqlDialect:
    """
    Renders parameterized CRUD statements for one table.

    Statements use named `:param` placeholders; SQLAlchemy's `text()`
    translates them to the driver's paramstyle, so dialects never deal
    with `%s` or `?` themselves.

    Subclasses override the class attributes and, when the engine hands
    back generated keys in the INSERT statement itself, `insert`.

    Attributes:
        provider: Provider the dialect renders for
        quote_open: Opening identifier quote
        quote_close: Closing identifier quote
        true_literal: Literal written for boolean true
        false_literal: Literal written for boolean false
        returns_inserted_id: Whether INSERT yields a row holding the new id
    """

    provider: DatabaseProvider
    quote_open: str = '"'
    quote_close: str = '"'
    true_literal: str = "1"
    false_literal: str = "0"
    returns_inserted_id: bool = False

    def quote(self, identifier: str) -> str:
        return f"{self.quote_open}{identifier}{self.quote_close}"

    def boolean(self, value: bool) -> str:
        return self.true_literal if value else self.false_literal

    def _column_list(self, columns: Sequence[str]) -> str:
        return ", ".join(self.quote(column) for column in columns)

    def _live_condition(self) -> str:
        return (
            f"{self.quote(DatabaseConstants.SOFT_DELETE_COLUMN)} = "
            f"{self.boolean(False)}"
        )

    # --------------------------------------------------------------------------
    # READS
    # --------------------------------------------------------------------------

    def select_all(
        self,
        table: str,
        columns: Sequence[str],
        include_deleted: bool = False,
    ) -> str:
        sql = f"SELECT {self._column_list(columns)} FROM {self.quote(table)}"
        if not include_deleted:
            sql += f" WHERE {self._live_condition()}"
        return sql + f" ORDER BY {self.quote('id')}"

    def select_by_id(
        self,
        table: str,
        columns: Sequence[str],
        include_deleted: bool = False,
    ) -> str:
        sql = (
            f"SELECT {self._column_list(columns)} FROM {self.quote(table)} "
            f"WHERE {self.quote('id')} = :id"
        )
        if not include_deleted:
            sql += f" AND {self._live_condition()}"
        return sql

    def count_live(self, table: str) -> str:
        return (
            f"SELECT COUNT(*) AS total FROM {self.quote(table)} "
            f"WHERE {self.quote('id')} = :id AND {self._live_condition()}"
        )

    # --------------------------------------------------------------------------
    # WRITES
    # --------------------------------------------------------------------------

    def _values_list(self, columns: Sequence[str]) -> str:
        return ", ".join(f":{column}" for column in columns)

    def insert(self, table: str, columns: Sequence[str]) -> str:
        """INSERT whose generated key is read from the driver's lastrowid."""
        return (
            f"INSERT INTO {self.quote(table)} ({self._column_list(columns)}) "
            f"VALUES ({self._values_list(columns)})"
        )

    def update(self, table: str, columns: Sequence[str]) -> str:
        """Full-row UPDATE of a live row; `columns` must not include id."""
        assignments = ", ".join(
            f"{self.quote(column)} = :{column}" for column in columns
        )
        return (
            f"UPDATE {self.quote(table)} SET {assignments} "
            f"WHERE {self.quote('id')} = :id AND {self._live_condition()}"
        )

    def delete(self, table: str) -> str:
        return f"DELETE FROM {self.quote(table)} WHERE {self.quote('id')} = :id"

    def soft_delete(self, table: str) -> str:
        return (
            f"UPDATE {self.quote(table)} "
            f"SET {self.quote(DatabaseConstants.SOFT_DELETE_COLUMN)} = "
            f"{self.boolean(True)} "
            f"WHERE {self.quote('id')} = :id AND {self._live_condition()}"
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(provider={self.provider.value})>"


class PostgreSQLDialect(SqlDialect):
    """PostgreSQL: native booleans and `RETURNING`."""

    provider = DatabaseProvider.POSTGRESQL
    true_literal = "TRUE"
    false_literal = "FALSE"
    returns_inserted_id = True

    def insert(self, table: str, columns: Sequence[str]) -> str:
        return super().insert(table, columns) + f" RETURNING {self.quote('id')}"


class SQLServerDialect(SqlDialect):
    """SQL Server: bracket quoting, BIT literals and `OUTPUT INSERTED`."""

    provider = DatabaseProvider.SQLSERVER
    quote_open = "["
    quote_close = "]"
    returns_inserted_id = True

    def insert(self, table: str, columns: Sequence[str]) -> str:
        # OUTPUT sits between the column list and VALUES
        return (
            f"INSERT INTO {self.quote(table)} ({self._column_list(columns)}) "
            f"OUTPUT INSERTED.{self.quote('id')} "
            f"VALUES ({self._values_list(columns)})"
        )


class MySQLDialect(SqlDialect):
    """MySQL: backtick quoting, TINYINT booleans, LAST_INSERT_ID via lastrowid."""

    provider = DatabaseProvider.MYSQL
    quote_open = "`"
    quote_close = "`"


class SQLiteDialect(SqlDialect):
    """SQLite: integer booleans and lastrowid."""

    provider = DatabaseProvider.SQLITE


_DIALECTS: Dict[DatabaseProvider, Type[SqlDialect]] = {
    DatabaseProvider.POSTGRESQL: PostgreSQLDialect,
    DatabaseProvider.SQLSERVER: SQLServerDialect,
    DatabaseProvider.MYSQL: MySQLDialect,
    DatabaseProvider.SQLITE: SQLiteDialect,
}


def dialect_for(provider: DatabaseProvider) -> SqlDialect:
    """
    Get the SQL dialect for a provider.

    Raises:
        ValueError: If no dialect is defined for the provider
    """
    try:
        return _DIALECTS[provider]()
    except KeyError:
        raise ValueError(f"No SQL dialect for provider: {provider}") from None
