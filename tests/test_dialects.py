# ==============================================================================
# SQL DIALECT TESTS
# ==============================================================================
# Statement rendering per provider; no database needed
# ==============================================================================

import pytest

from access_admin.core.settings import DatabaseProvider
from access_admin.database.dialects import (
    MySQLDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    SQLServerDialect,
    dialect_for,
)

COLUMNS = ["name", "status", "is_deleted"]


class TestDialectLookup:

    @pytest.mark.parametrize(
        "provider, dialect_type",
        [
            (DatabaseProvider.POSTGRESQL, PostgreSQLDialect),
            (DatabaseProvider.MYSQL, MySQLDialect),
            (DatabaseProvider.SQLSERVER, SQLServerDialect),
            (DatabaseProvider.SQLITE, SQLiteDialect),
        ],
    )
    def test_dialect_for_provider(self, provider, dialect_type):
        dialect = dialect_for(provider)
        assert isinstance(dialect, dialect_type)
        assert dialect.provider is provider


class TestPostgreSQLDialect:

    def test_insert_returns_id(self):
        sql = PostgreSQLDialect().insert("form", COLUMNS)
        assert sql == (
            'INSERT INTO "form" ("name", "status", "is_deleted") '
            'VALUES (:name, :status, :is_deleted) RETURNING "id"'
        )

    def test_boolean_literals(self):
        sql = PostgreSQLDialect().soft_delete("form")
        assert '"is_deleted" = TRUE' in sql
        assert '"is_deleted" = FALSE' in sql


class TestSQLServerDialect:

    def test_insert_outputs_inserted_id(self):
        sql = SQLServerDialect().insert("form", ["name"])
        assert sql == "INSERT INTO [form] ([name]) OUTPUT INSERTED.[id] VALUES (:name)"

    def test_live_filter_uses_bit_literal(self):
        sql = SQLServerDialect().select_all("form", ["id", "name"])
        assert sql == "SELECT [id], [name] FROM [form] WHERE [is_deleted] = 0 ORDER BY [id]"


class TestMySQLDialect:

    def test_insert_relies_on_last_insert_id(self):
        dialect = MySQLDialect()
        assert dialect.returns_inserted_id is False
        assert dialect.insert("form", ["name"]) == "INSERT INTO `form` (`name`) VALUES (:name)"

    def test_update_only_touches_live_rows(self):
        sql = MySQLDialect().update("form", ["name", "status"])
        assert sql == (
            "UPDATE `form` SET `name` = :name, `status` = :status "
            "WHERE `id` = :id AND `is_deleted` = 0"
        )


class TestSharedStatements:

    def test_select_all_including_deleted_has_no_filter(self):
        sql = SQLiteDialect().select_all("form", ["id"], include_deleted=True)
        assert "WHERE" not in sql

    def test_select_by_id(self):
        sql = SQLiteDialect().select_by_id("form", ["id"])
        assert sql == 'SELECT "id" FROM "form" WHERE "id" = :id AND "is_deleted" = 0'

    def test_delete(self):
        assert SQLiteDialect().delete("form") == 'DELETE FROM "form" WHERE "id" = :id'
