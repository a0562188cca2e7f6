# ==============================================================================
# REPOSITORIES PACKAGE INITIALIZATION
# ==============================================================================

"""
Repository Pattern Implementation
=================================

Provides data access abstraction through the Repository Pattern:
- BaseRepository: Uniform CRUD contract
- SQLAlchemyRepository: ORM implementation for every model
- FormSqlRepository: Raw SQL implementation for forms, per provider
"""

from access_admin.database.repositories.base_repository import BaseRepository
from access_admin.database.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)
from access_admin.database.repositories.form_sql_repository import (
    FormSqlRepository,
)

__all__ = [
    "BaseRepository",
    "SQLAlchemyRepository",
    "FormSqlRepository",
]
