# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================
# Core utilities: Settings, Exceptions, Constants, Security, Logging
# ==============================================================================

"""
Core Module
===========

Contains core utilities and configurations for the application:
- settings: Environment configuration management
- exceptions: Error hierarchy mapped to HTTP status codes
- constants: Table names and standardized messages
- security: Password hashing
- logging: Root logger configuration
"""

from access_admin.core.settings import settings, get_settings, DatabaseProvider
from access_admin.core.exceptions import (
    AppException,
    DatabaseError,
    EntityNotFoundError,
    ExternalServiceError,
    ValidationError,
)

__all__ = [
    "settings",
    "get_settings",
    "DatabaseProvider",
    "AppException",
    "DatabaseError",
    "EntityNotFoundError",
    "ExternalServiceError",
    "ValidationError",
]
