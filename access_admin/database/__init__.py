# ==============================================================================
# DATABASE PACKAGE INITIALIZATION
# ==============================================================================
# Database Abstraction Layer with multi-provider support
# ==============================================================================

"""
Database Module
===============

Provides a unified database abstraction layer supporting:
- PostgreSQL (default)
- MySQL
- SQL Server
- SQLite (development/testing)

Key Components:
- Adapters: SQLAlchemy async engine per provider
- Factory: Adapter instantiation and caching
- Dialects: Provider-specific raw SQL rendering
- Repositories: Data access abstraction
- Form provider selector: Runtime persistence target for forms
"""

from access_admin.database.factory import DatabaseFactory
from access_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from access_admin.database.dialects import SqlDialect, dialect_for
from access_admin.database.form_provider import (
    FormProviderSelector,
    form_provider_selector,
)

__all__ = [
    "DatabaseFactory",
    "BaseDatabaseAdapter",
    "SqlDialect",
    "dialect_for",
    "FormProviderSelector",
    "form_provider_selector",
]
