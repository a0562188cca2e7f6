# ==============================================================================
# DATABASE ADAPTERS PACKAGE
# ==============================================================================

"""
Database Adapters
=================

Provides unified interface implementations for relational databases:
- BaseDatabaseAdapter: Abstract interface definition
- SQLAlchemyAdapter: SQLAlchemy async engine for any supported provider
"""

from access_admin.database.adapters.base_adapter import (
    BaseDatabaseAdapter,
    WriteResult,
)
from access_admin.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter

__all__ = [
    "BaseDatabaseAdapter",
    "SQLAlchemyAdapter",
    "WriteResult",
]
