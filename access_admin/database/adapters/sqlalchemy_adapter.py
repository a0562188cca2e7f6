# ==============================================================================
# SQLALCHEMY ADAPTER - Async Engine per Provider
# ==============================================================================
# One adapter class serves every relational provider; the URL and the
# driver-specific engine options are what differ
# ==============================================================================

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Type

from sqlalchemy import and_, delete, event, func, select, text, update
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from access_admin.core.settings import settings, DatabaseProvider
from access_admin.core.exceptions import DatabaseError
from access_admin.database.adapters.base_adapter import (
    BaseDatabaseAdapter,
    RawQuery,
    WriteResult,
)
from access_admin.domain_models.base import SQLBase

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SQLAlchemyAdapter(BaseDatabaseAdapter[SQLBase]):
    """
    Relational database adapter using SQLAlchemy async.

    Features:
        - Async operations through asyncpg, aiomysql, aioodbc or aiosqlite
        - Optional table creation on connect
        - Collection names resolved through a model registry
        - Raw statement execution for hand-written SQL repositories

    Attributes:
        provider: Provider this adapter targets
        _database_url: Async connection string
        _engine: SQLAlchemy async engine
        _session_factory: Session factory for creating sessions
        _model_registry: Mapping of table names to model classes

    Example:
        >>> adapter = SQLAlchemyAdapter(DatabaseProvider.SQLITE)
        >>> await adapter.connect()
        >>> adapter.register_model("rol", Rol)
        >>> rol = await adapter.create("rol", {"role": "Admin"})
    """

    def __init__(
        self,
        provider: Optional[DatabaseProvider] = None,
        database_url: Optional[str] = None,
    ) -> None:
        """
        Initialize adapter.

        Args:
            provider: Target provider (defaults to settings)
            database_url: Connection URL override (defaults to settings)
        """
        self.provider = provider or settings.DATABASE_PROVIDER
        url = database_url or settings.database_url_for(self.provider)
        # Ensure async driver is used
        if url.startswith("sqlite://"):
            url = url.replace("sqlite://", "sqlite+aiosqlite://")

        self._database_url = url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._model_registry: Dict[str, Type[SQLBase]] = {}

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    # ==========================================================================
    # MODEL REGISTRY
    # ==========================================================================

    def register_model(
        self,
        name: str,
        model: Type[SQLBase],
    ) -> None:
        """
        Register a SQLAlchemy model for table mapping.

        Args:
            name: Table identifier
            model: SQLAlchemy model class
        """
        self._model_registry[name] = model
        logger.debug(f"Registered model '{name}' -> {model.__name__}")

    def _get_model(self, collection: str) -> Type[SQLBase]:
        """
        Get registered model by table name.

        Raises:
            ValueError: If model not registered
        """
        if collection not in self._model_registry:
            raise ValueError(
                f"Model '{collection}' not registered. "
                f"Available models: {list(self._model_registry.keys())}"
            )
        return self._model_registry[collection]

    @staticmethod
    def _conditions(model: Type[SQLBase], filters: Optional[Dict[str, Any]]) -> list:
        if not filters:
            return []
        return [
            getattr(model, key) == value
            for key, value in filters.items()
            if hasattr(model, key)
        ]

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    def _engine_options(self) -> Dict[str, Any]:
        if self.provider == DatabaseProvider.SQLITE:
            return {"connect_args": {"check_same_thread": False}}
        return {
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_pre_ping": True,
        }

    async def connect(self) -> None:
        """
        Initialize database engine and create missing tables.

        Raises:
            DatabaseError: If the engine cannot be created or reached
        """
        try:
            self._engine = create_async_engine(
                self._database_url,
                echo=settings.DEBUG,
                **self._engine_options(),
            )
            if self.provider == DatabaseProvider.SQLITE:
                event.listen(
                    self._engine.sync_engine,
                    "connect",
                    _enable_sqlite_foreign_keys,
                )

            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            if settings.DB_CREATE_TABLES:
                async with self._engine.begin() as conn:
                    await conn.run_sync(SQLBase.metadata.create_all)

            logger.info(f"{self.provider.value} adapter connected successfully")

        except Exception as e:
            logger.error(f"Failed to connect to {self.provider.value}: {e}")
            self._engine = None
            self._session_factory = None
            raise DatabaseError(f"{self.provider.value} connection failed: {e}") from e

    async def disconnect(self) -> None:
        """Close database connections and dispose engine."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info(f"{self.provider.value} adapter disconnected")

    async def health_check(self) -> bool:
        """Verify database connectivity with a trivial query."""
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"{self.provider.value} health check failed: {e}")
            return False

    # ==========================================================================
    # SESSION MANAGEMENT
    # ==========================================================================

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide transactional session scope.

        Commits on successful exit, rolls back on exception.

        Raises:
            RuntimeError: If database not connected
        """
        if not self._session_factory:
            raise RuntimeError(
                "Database not connected. Call connect() first."
            )

        session: AsyncSession = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> SQLBase:
        """Create a new record."""
        model = self._get_model(collection)

        async with self.session() as session:
            instance = model(**data)
            session.add(instance)
            await session.flush()
            await session.refresh(instance)
            return instance

    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[SQLBase]:
        """Retrieve record by primary key."""
        model = self._get_model(collection)

        async with self.session() as session:
            return await session.get(model, id)

    async def get_all(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[SQLBase]:
        """Retrieve records matching filters, ordered by id."""
        model = self._get_model(collection)

        async with self.session() as session:
            query = select(model)

            conditions = self._conditions(model, filters)
            if conditions:
                query = query.where(and_(*conditions))

            query = query.order_by(model.id)
            if limit is not None:
                query = query.limit(limit)

            result = await session.execute(query)
            return list(result.scalars().all())

    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """Delete a record by ID."""
        model = self._get_model(collection)

        async with self.session() as session:
            result = await session.execute(delete(model).where(model.id == id))
            return result.rowcount > 0

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count records matching filters."""
        model = self._get_model(collection)

        async with self.session() as session:
            query = select(func.count()).select_from(model)

            conditions = self._conditions(model, filters)
            if conditions:
                query = query.where(and_(*conditions))

            result = await session.execute(query)
            return result.scalar() or 0

    async def exists(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> bool:
        """Check if any record matches filters."""
        count = await self.count(collection, filters)
        return count > 0

    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[SQLBase]:
        """Find a single record matching filters."""
        results = await self.get_all(collection, filters=filters, limit=1)
        return results[0] if results else None

    # ==========================================================================
    # BULK OPERATIONS
    # ==========================================================================

    async def bulk_update(
        self,
        collection: str,
        filters: Dict[str, Any],
        data: Dict[str, Any],
    ) -> int:
        """Bulk update records matching filters."""
        model = self._get_model(collection)

        async with self.session() as session:
            conditions = self._conditions(model, filters)

            stmt = (
                update(model)
                .where(and_(*conditions))
                .values(**data)
                .execution_options(synchronize_session=False)
            )
            result = await session.execute(stmt)
            return result.rowcount

    # ==========================================================================
    # RAW QUERY EXECUTION
    # ==========================================================================

    async def execute_raw(
        self,
        query: RawQuery,
        params: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """Execute raw SQL returning rows."""
        statement = text(query) if isinstance(query, str) else query
        async with self.session() as session:
            result = await session.execute(statement, params or {})
            return [dict(row) for row in result.mappings().all()]

    async def execute_write(
        self,
        query: RawQuery,
        params: Optional[Dict[str, Any]] = None,
    ) -> WriteResult:
        """Execute raw SQL that modifies rows."""
        statement = text(query) if isinstance(query, str) else query
        async with self.session() as session:
            result = await session.execute(statement, params or {})
            lastrowid = getattr(result, "lastrowid", None)
            return WriteResult(rowcount=result.rowcount, lastrowid=lastrowid)
