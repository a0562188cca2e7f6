# ==============================================================================
# DATABASE FACTORY - Adapter Instantiation & Lifecycle Management
# ==============================================================================
# Factory Pattern for creating and managing one adapter per provider
# Singleton caching for efficient resource utilization
# ==============================================================================

from __future__ import annotations

import logging
from typing import Dict, Optional

from access_admin.core.settings import settings, DatabaseProvider
from access_admin.core.exceptions import DatabaseError
from access_admin.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter

logger = logging.getLogger(__name__)


class DatabaseFactory:
    """
    Factory class for creating and managing database adapters.

    Implements the Factory Pattern with singleton caching so every
    provider owns exactly one engine and connection pool.

    Features:
        - Adapter creation per provider
        - Lazy initialization of providers other than the default
        - Lifecycle management (initialize/shutdown)

    Class Attributes:
        _instances: Cache of adapter instances keyed by provider

    Example:
        >>> # Initialize the default provider at application startup
        >>> await DatabaseFactory.initialize()
        >>>
        >>> # Form repositories may target another provider on demand
        >>> adapter = await DatabaseFactory.get_or_initialize(DatabaseProvider.MYSQL)
        >>>
        >>> # Shutdown at application exit
        >>> await DatabaseFactory.shutdown()
    """

    _instances: Dict[DatabaseProvider, SQLAlchemyAdapter] = {}

    @classmethod
    def create_adapter(
        cls,
        provider: Optional[DatabaseProvider] = None,
        **kwargs,
    ) -> SQLAlchemyAdapter:
        """
        Create and return the adapter for a provider.

        Returns cached instance if available, otherwise creates new.

        Args:
            provider: Database provider (defaults to settings.DATABASE_PROVIDER)
            **kwargs: Additional adapter configuration
                - database_url: Custom connection URL

        Returns:
            Database adapter instance
        """
        provider = provider or settings.DATABASE_PROVIDER

        # Return cached instance if available
        if provider in cls._instances:
            return cls._instances[provider]

        adapter = SQLAlchemyAdapter(
            provider=provider,
            database_url=kwargs.get("database_url"),
        )
        cls._register_models(adapter)
        logger.info(f"Created {provider.value} adapter")

        cls._instances[provider] = adapter
        return adapter

    @classmethod
    async def initialize(
        cls,
        provider: Optional[DatabaseProvider] = None,
    ) -> SQLAlchemyAdapter:
        """
        Initialize database connection.

        Creates adapter and establishes database connection.
        Should be called at application startup.

        Args:
            provider: Database provider (defaults to settings.DATABASE_PROVIDER)

        Returns:
            Initialized database adapter

        Raises:
            DatabaseError: If connection fails
        """
        provider = provider or settings.DATABASE_PROVIDER
        adapter = cls.create_adapter(provider)

        try:
            if not adapter.is_connected:
                await adapter.connect()
            logger.info(f"Database initialized: {provider.value}")
            return adapter
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise DatabaseError(f"Failed to initialize database: {e}") from e

    @classmethod
    async def get_or_initialize(
        cls,
        provider: DatabaseProvider,
    ) -> SQLAlchemyAdapter:
        """
        Get a connected adapter, connecting it on first use.

        Existing adapters of other providers are left untouched.
        """
        adapter = cls._instances.get(provider)
        if adapter is not None and adapter.is_connected:
            return adapter
        return await cls.initialize(provider)

    @classmethod
    def _register_models(cls, adapter: SQLAlchemyAdapter) -> None:
        """Register all domain models with the adapter."""
        from access_admin.domain_models import (
            Form,
            Module,
            ModuleForm,
            Permission,
            Person,
            Rol,
            RolFormPermission,
            RolUser,
            User,
        )

        for model in (
            Person,
            User,
            Rol,
            Permission,
            Form,
            Module,
            RolUser,
            ModuleForm,
            RolFormPermission,
        ):
            adapter.register_model(model.__tablename__, model)

        logger.debug("Registered all domain models with adapter")

    @classmethod
    async def shutdown(cls) -> None:
        """
        Close all database connections.

        Releases all resources and clears adapter cache.
        Should be called at application shutdown.
        """
        for provider, adapter in cls._instances.items():
            try:
                await adapter.disconnect()
                logger.info(f"Disconnected: {provider.value}")
            except Exception as e:
                logger.error(f"Error disconnecting {provider.value}: {e}")

        cls._instances.clear()
        logger.info("All database connections closed")

    @classmethod
    def get_adapter(
        cls,
        provider: Optional[DatabaseProvider] = None,
    ) -> SQLAlchemyAdapter:
        """
        Get existing adapter instance.

        Args:
            provider: Database provider (defaults to settings.DATABASE_PROVIDER)

        Returns:
            Initialized adapter instance

        Raises:
            RuntimeError: If adapter not initialized
        """
        provider = provider or settings.DATABASE_PROVIDER

        if provider not in cls._instances:
            raise RuntimeError(
                f"Database adapter for {provider.value} not initialized. "
                f"Call DatabaseFactory.initialize() first."
            )

        return cls._instances[provider]

    @classmethod
    def is_initialized(
        cls,
        provider: Optional[DatabaseProvider] = None,
    ) -> bool:
        """Check if an adapter for the provider is cached."""
        provider = provider or settings.DATABASE_PROVIDER
        return provider in cls._instances

    @classmethod
    async def health_check(
        cls,
        provider: Optional[DatabaseProvider] = None,
    ) -> bool:
        """
        Check database health.

        Args:
            provider: Database provider to check

        Returns:
            True if database is healthy
        """
        try:
            adapter = cls.get_adapter(provider)
        except RuntimeError:
            return False
        return await adapter.health_check()

    @classmethod
    def reset(cls) -> None:
        """
        Reset factory state.

        Clears adapter cache without disconnecting.
        Primarily for testing purposes.
        """
        cls._instances.clear()
