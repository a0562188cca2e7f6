# ==============================================================================
# SETTINGS CONFIGURATION - Environment Management
# ==============================================================================
# Pydantic Settings for type-safe environment variable management
# One connection block per supported database provider
# ==============================================================================

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import Field, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseProvider(str, Enum):
    """
    Relational engines the data layer can target.

    Attributes:
        SQLITE: File-based database for development/testing
        POSTGRESQL: Default production database
        MYSQL: MySQL / MariaDB
        SQLSERVER: Microsoft SQL Server through ODBC
    """
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLSERVER = "sqlserver"

    @classmethod
    def parse(cls, value: str) -> "DatabaseProvider":
        """
        Resolve a provider from a case-insensitive name.

        Raises:
            ValueError: If the name is not a supported provider
        """
        normalized = (value or "").strip().lower()
        for provider in cls:
            if provider.value == normalized:
                return provider
        supported = ", ".join(p.value for p in cls)
        raise ValueError(
            f"Database provider '{value}' is not supported. "
            f"Supported providers: {supported}"
        )


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application Settings Configuration.

    Manages all environment variables with type validation and defaults.
    Values are read from the process environment and an optional `.env`
    file.

    Example:
        >>> from access_admin.core.settings import settings
        >>> settings.DATABASE_PROVIDER
        <DatabaseProvider.POSTGRESQL: 'postgresql'>
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # --------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # --------------------------------------------------------------------------
    APP_NAME: str = Field(
        default="Access Admin",
        description="Application display name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application semantic version"
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (SQL echo, error details)"
    )
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Current deployment environment"
    )

    # --------------------------------------------------------------------------
    # API CONFIGURATION
    # --------------------------------------------------------------------------
    API_PREFIX: str = Field(
        default="/api",
        description="Route prefix for all entity controllers"
    )
    API_TITLE: str = Field(
        default="Access Admin API",
        description="OpenAPI documentation title"
    )
    API_DESCRIPTION: str = Field(
        default="Administration of users, roles, permissions, forms and modules",
        description="OpenAPI documentation description"
    )

    # --------------------------------------------------------------------------
    # DATABASE PROVIDER SELECTION
    # --------------------------------------------------------------------------
    DATABASE_PROVIDER: DatabaseProvider = Field(
        default=DatabaseProvider.POSTGRESQL,
        description="Active database provider (sqlite, postgresql, mysql, sqlserver)"
    )
    DB_CREATE_TABLES: bool = Field(
        default=True,
        description="Create missing tables when an adapter connects"
    )

    # --------------------------------------------------------------------------
    # SQLITE CONFIGURATION
    # --------------------------------------------------------------------------
    SQLITE_URL: str = Field(
        default="sqlite:///./access_admin.db",
        description="SQLite database file path"
    )

    # --------------------------------------------------------------------------
    # POSTGRESQL CONFIGURATION
    # --------------------------------------------------------------------------
    POSTGRES_HOST: str = Field(default="localhost")
    POSTGRES_PORT: int = Field(default=5432, ge=1, le=65535)
    POSTGRES_USER: str = Field(default="postgres")
    POSTGRES_PASSWORD: str = Field(default="password")
    POSTGRES_DB: str = Field(default="access_admin")

    # --------------------------------------------------------------------------
    # MYSQL CONFIGURATION
    # --------------------------------------------------------------------------
    MYSQL_HOST: str = Field(default="localhost")
    MYSQL_PORT: int = Field(default=3306, ge=1, le=65535)
    MYSQL_USER: str = Field(default="root")
    MYSQL_PASSWORD: str = Field(default="password")
    MYSQL_DB: str = Field(default="access_admin")

    # --------------------------------------------------------------------------
    # SQL SERVER CONFIGURATION
    # --------------------------------------------------------------------------
    SQLSERVER_HOST: str = Field(default="localhost")
    SQLSERVER_PORT: int = Field(default=1433, ge=1, le=65535)
    SQLSERVER_USER: str = Field(default="sa")
    SQLSERVER_PASSWORD: str = Field(default="Password123!")
    SQLSERVER_DB: str = Field(default="access_admin")
    SQLSERVER_ODBC_DRIVER: str = Field(
        default="ODBC Driver 18 for SQL Server",
        description="Installed ODBC driver name used by aioodbc"
    )
    SQLSERVER_TRUST_CERTIFICATE: bool = Field(default=True)

    # --------------------------------------------------------------------------
    # CONNECTION POOL SETTINGS
    # --------------------------------------------------------------------------
    DB_POOL_SIZE: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Database connection pool size"
    )
    DB_MAX_OVERFLOW: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Maximum overflow connections beyond pool size"
    )
    DB_POOL_TIMEOUT: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Connection pool timeout in seconds"
    )
    DB_POOL_RECYCLE: int = Field(
        default=3600,
        ge=60,
        description="Connection recycle time in seconds"
    )

    # --------------------------------------------------------------------------
    # SECURITY SETTINGS
    # --------------------------------------------------------------------------
    PASSWORD_HASH_SCHEME: str = Field(
        default="pbkdf2_sha256",
        description="passlib scheme used to hash stored user passwords"
    )

    # --------------------------------------------------------------------------
    # CORS SETTINGS
    # --------------------------------------------------------------------------
    CORS_ORIGINS: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True,
        description="Allow credentials in CORS requests"
    )

    # --------------------------------------------------------------------------
    # LOGGING CONFIGURATION
    # --------------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    LOG_FORMAT: str = Field(
        default="text",
        description="Log format (json, text)"
    )

    # --------------------------------------------------------------------------
    # COMPUTED PROPERTIES
    # --------------------------------------------------------------------------
    @computed_field
    @property
    def postgres_url(self) -> str:
        """Async PostgreSQL connection string with the asyncpg driver."""
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:"
            f"{quote_plus(self.POSTGRES_PASSWORD)}@{self.POSTGRES_HOST}:"
            f"{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @computed_field
    @property
    def mysql_url(self) -> str:
        """Async MySQL connection string with the aiomysql driver."""
        return (
            f"mysql+aiomysql://{self.MYSQL_USER}:"
            f"{quote_plus(self.MYSQL_PASSWORD)}@{self.MYSQL_HOST}:"
            f"{self.MYSQL_PORT}/{self.MYSQL_DB}?charset=utf8mb4"
        )

    @computed_field
    @property
    def sqlserver_url(self) -> str:
        """
        Async SQL Server connection string with the aioodbc driver.

        The ODBC driver name goes into the query string with spaces
        encoded as `+`, as SQLAlchemy's mssql dialect expects.
        """
        driver = quote_plus(self.SQLSERVER_ODBC_DRIVER)
        trust = "yes" if self.SQLSERVER_TRUST_CERTIFICATE else "no"
        return (
            f"mssql+aioodbc://{self.SQLSERVER_USER}:"
            f"{quote_plus(self.SQLSERVER_PASSWORD)}@{self.SQLSERVER_HOST}:"
            f"{self.SQLSERVER_PORT}/{self.SQLSERVER_DB}"
            f"?driver={driver}&TrustServerCertificate={trust}"
        )

    @computed_field
    @property
    def sqlite_async_url(self) -> str:
        """SQLite connection string with the aiosqlite driver."""
        if "aiosqlite" in self.SQLITE_URL:
            return self.SQLITE_URL
        return self.SQLITE_URL.replace("sqlite://", "sqlite+aiosqlite://")

    def database_url_for(self, provider: Optional[DatabaseProvider] = None) -> str:
        """
        Get the async connection URL for a provider.

        Args:
            provider: Target provider (defaults to DATABASE_PROVIDER)

        Returns:
            Async SQLAlchemy connection URL

        Raises:
            ValueError: If provider is not supported
        """
        provider = provider or self.DATABASE_PROVIDER
        if provider == DatabaseProvider.SQLITE:
            return self.sqlite_async_url
        elif provider == DatabaseProvider.POSTGRESQL:
            return self.postgres_url
        elif provider == DatabaseProvider.MYSQL:
            return self.mysql_url
        elif provider == DatabaseProvider.SQLSERVER:
            return self.sqlserver_url
        raise ValueError(f"Unsupported database provider: {provider}")

    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    # --------------------------------------------------------------------------
    # VALIDATORS
    # --------------------------------------------------------------------------
    @field_validator("DATABASE_PROVIDER", mode="before")
    @classmethod
    def parse_provider(cls, v):
        """Accept provider names in any case."""
        if isinstance(v, str):
            return DatabaseProvider.parse(v)
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()


# Module-level settings instance for convenient imports
settings = get_settings()
