# ==============================================================================
# ACCESS ADMIN PACKAGE INITIALIZATION
# ==============================================================================
# Role-based access control administration API with FastAPI
# Supports: PostgreSQL, MySQL, SQL Server, SQLite
# Architecture: Repository Pattern, Factory Pattern, Service Layer
# ==============================================================================

"""
Access Admin
============

CRUD API for people, user accounts, roles, permissions, forms, modules
and the assignments between them.

Features:
---------
- Soft and hard deletes declared once per model
- Referential checks before junction rows are written
- Form persistence switchable between database providers at runtime
- Raw parameterized SQL for forms, rendered per SQL dialect

Usage:
------
    from access_admin.main import app

    # Run with uvicorn
    uvicorn access_admin.main:app --reload
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
