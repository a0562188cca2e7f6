# ==============================================================================
# APPLICATION CONSTANTS - Centralized Configuration Values
# ==============================================================================
# Immutable constants used throughout the application
# ==============================================================================

from __future__ import annotations

from typing import Final


# ==============================================================================
# API CONSTANTS
# ==============================================================================

class APIConstants:
    """API-related constants."""

    REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
    RESPONSE_TIME_HEADER: Final[str] = "X-Response-Time"
    LOGICAL_DELETE_SEGMENT: Final[str] = "logico"


# ==============================================================================
# DATABASE CONSTANTS
# ==============================================================================

class DatabaseConstants:
    """Table names shared by the ORM models and the raw SQL layer."""

    PERSON_TABLE: Final[str] = "person"
    USER_TABLE: Final[str] = "user_account"
    ROL_TABLE: Final[str] = "rol"
    PERMISSION_TABLE: Final[str] = "permission"
    FORM_TABLE: Final[str] = "form"
    MODULE_TABLE: Final[str] = "module"
    ROL_USER_TABLE: Final[str] = "rol_user"
    MODULE_FORM_TABLE: Final[str] = "module_form"
    ROL_FORM_PERMISSION_TABLE: Final[str] = "rol_form_permission"

    SOFT_DELETE_COLUMN: Final[str] = "is_deleted"

    # Largest key every supported driver binds as an integer
    MAX_ID: Final[int] = 2**63 - 1


# ==============================================================================
# ERROR MESSAGES
# ==============================================================================

class ErrorMessages:
    """Standardized messages returned to API clients."""

    NULL_PAYLOAD: Final[str] = "The {entity} payload cannot be empty"
    REQUIRED_FIELD: Final[str] = "The {field} of the {entity} is required"
    INVALID_ID: Final[str] = "The {entity} id must be a positive 64-bit integer"
    PARENT_NOT_FOUND: Final[str] = "Referenced {entity} with id {id} does not exist"
    DUPLICATE_ASSIGNMENT: Final[str] = (
        "Rol {rol_id} is already assigned to user {user_id}"
    )
    SOFT_DELETE_UNSUPPORTED: Final[str] = "{entity} does not support logical delete"

    LIST_FAILED: Final[str] = "Error retrieving the list of {entity} records"
    GET_FAILED: Final[str] = "Error retrieving {entity} with id {id}"
    CREATE_FAILED: Final[str] = "Error creating {entity}"
    UPDATE_FAILED: Final[str] = "Error updating {entity} with id {id}"
    DELETE_FAILED: Final[str] = "Error deleting {entity} with id {id}"


# ==============================================================================
# SUCCESS MESSAGES
# ==============================================================================

class SuccessMessages:
    """Standardized success messages."""

    DELETED: Final[str] = "{entity} with id {id} was deleted"
    LOGICALLY_DELETED: Final[str] = "{entity} with id {id} was logically deleted"
    PROVIDER_CHANGED: Final[str] = "Database provider changed to {provider}"
