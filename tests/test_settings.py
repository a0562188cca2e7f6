# ==============================================================================
# SETTINGS TESTS
# ==============================================================================
# Provider parsing and connection URL construction
# ==============================================================================

import pytest

from access_admin.core.settings import DatabaseProvider, Settings


class TestDatabaseProvider:
    """Tests for provider name parsing."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("postgresql", DatabaseProvider.POSTGRESQL),
            ("MySQL", DatabaseProvider.MYSQL),
            (" SQLSERVER ", DatabaseProvider.SQLSERVER),
            ("sqlite", DatabaseProvider.SQLITE),
        ],
    )
    def test_parse_is_case_insensitive(self, name, expected):
        assert DatabaseProvider.parse(name) is expected

    def test_parse_rejects_unknown_provider(self):
        with pytest.raises(ValueError, match="Supported providers"):
            DatabaseProvider.parse("oracle")


class TestDatabaseUrls:
    """Tests for async connection URLs per provider."""

    @pytest.fixture
    def config(self) -> Settings:
        return Settings(
            _env_file=None,
            DATABASE_PROVIDER="postgresql",
            POSTGRES_PASSWORD="p@ss",
            MYSQL_HOST="mysql.local",
            SQLSERVER_ODBC_DRIVER="ODBC Driver 18 for SQL Server",
            SQLITE_URL="sqlite:///./dev.db",
        )

    def test_provider_from_string(self, config: Settings):
        assert config.DATABASE_PROVIDER is DatabaseProvider.POSTGRESQL

    def test_postgres_url_escapes_password(self, config: Settings):
        url = config.database_url_for(DatabaseProvider.POSTGRESQL)
        assert url.startswith("postgresql+asyncpg://postgres:p%40ss@")

    def test_default_provider_url(self, config: Settings):
        assert config.database_url_for() == config.postgres_url

    def test_mysql_url(self, config: Settings):
        url = config.database_url_for(DatabaseProvider.MYSQL)
        assert url.startswith("mysql+aiomysql://")
        assert "@mysql.local:3306/" in url

    def test_sqlserver_url(self, config: Settings):
        url = config.database_url_for(DatabaseProvider.SQLSERVER)
        assert url.startswith("mssql+aioodbc://")
        assert "driver=ODBC+Driver+18+for+SQL+Server" in url

    def test_sqlite_url_uses_async_driver(self, config: Settings):
        assert config.database_url_for(DatabaseProvider.SQLITE) == "sqlite+aiosqlite:///./dev.db"

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
