# ==============================================================================
# BASE DATABASE ADAPTER - Abstract Interface
# ==============================================================================
# Defines the contract for all database adapters
# Ensures consistent API across PostgreSQL, MySQL, SQL Server and SQLite
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import (
    Any,
    AsyncIterator,
    Dict,
    Generic,
    List,
    Optional,
    TypeVar,
    Union,
)

from sqlalchemy.sql import Executable

# Type variable for generic database records
T = TypeVar("T")

# Raw statements may be plain SQL strings or prepared SQLAlchemy constructs
RawQuery = Union[str, Executable]


@dataclass(frozen=True)
class WriteResult:
    """
    Outcome of a raw write statement.

    Attributes:
        rowcount: Rows affected as reported by the driver
        lastrowid: Generated key reported by the driver, when supported
    """

    rowcount: int
    lastrowid: Optional[int] = None


class BaseDatabaseAdapter(ABC, Generic[T]):
    """
    Abstract Base Class for Database Adapters.

    Provides a unified interface for CRUD operations across different
    database backends. All concrete adapters must implement these methods
    to ensure consistent behavior.

    Generic Parameters:
        T: The type of records returned by the adapter

    Thread Safety:
        All methods are async and designed for concurrent access.
        Connection pooling is handled by the underlying driver.

    Example:
        >>> adapter = SQLAlchemyAdapter(DatabaseProvider.POSTGRESQL)
        >>> await adapter.connect()
        >>> rol = await adapter.create("rol", {"role": "Admin"})
        >>> await adapter.disconnect()
    """

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """
        Establish database connection.

        Raises:
            DatabaseError: If connection cannot be established
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close database connection and release pooled connections."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        pass

    # ==========================================================================
    # SESSION MANAGEMENT
    # ==========================================================================

    @abstractmethod
    @asynccontextmanager
    async def session(self) -> AsyncIterator[Any]:
        """
        Provide a transactional session scope.

        Changes are committed on successful exit or rolled back on
        exception.
        """
        pass

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> T:
        """
        Create a new record.

        Args:
            collection: Table name
            data: Column values

        Returns:
            Created record with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[T]:
        """Retrieve a record by primary key, None when missing."""
        pass

    @abstractmethod
    async def get_all(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[T]:
        """
        Retrieve records matching filters, ordered by primary key.

        Args:
            collection: Table name
            filters: Column-value equality pairs
            limit: Maximum number of records to return, None for all
        """
        pass

    @abstractmethod
    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """
        Delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        pass

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count records matching filters."""
        pass

    @abstractmethod
    async def exists(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> bool:
        """Check if any record matches the filters."""
        pass

    @abstractmethod
    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[T]:
        """Find the first record matching filters."""
        pass

    # ==========================================================================
    # BULK OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def bulk_update(
        self,
        collection: str,
        filters: Dict[str, Any],
        data: Dict[str, Any],
    ) -> int:
        """
        Update records matching filters.

        Returns:
            Number of records updated
        """
        pass

    # ==========================================================================
    # RAW QUERY EXECUTION
    # ==========================================================================

    @abstractmethod
    async def execute_raw(
        self,
        query: RawQuery,
        params: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Execute a raw row-returning statement.

        Use with caution - bypasses the model registry.

        Returns:
            Result rows as dictionaries keyed by column label
        """
        pass

    @abstractmethod
    async def execute_write(
        self,
        query: RawQuery,
        params: Optional[Dict[str, Any]] = None,
    ) -> WriteResult:
        """Execute a raw statement that returns no rows."""
        pass
