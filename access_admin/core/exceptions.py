# ==============================================================================
# CUSTOM EXCEPTIONS - Application Error Hierarchy
# ==============================================================================
# Structured exception classes for consistent error handling
# Each exception maps to the HTTP status code the API returns for it
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status code to return
        details: Additional context dictionary

    Example:
        >>> raise AppException(message="Something went wrong", status_code=500)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to the JSON body returned to clients.

        Returns:
            Dictionary with a `message` and, when present, `details`
        """
        body: Dict[str, Any] = {"message": self.message}
        if self.details:
            body["details"] = self.details
        return body

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"status_code={self.status_code})"
        )


# ==============================================================================
# VALIDATION EXCEPTIONS
# ==============================================================================

class ValidationError(AppException):
    """
    Raised when input validation fails.

    Maps to HTTP 400 Bad Request. Covers absent DTOs, blank mandatory
    fields, non-positive ids and junction rows pointing at missing parents.

    Attributes:
        field: Name of the offending field, when known
    """

    def __init__(
        self,
        message: str = "Validation error",
        field: Optional[str] = None,
    ) -> None:
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            status_code=400,
            details=details,
        )
        self.field = field


# ==============================================================================
# RESOURCE EXCEPTIONS
# ==============================================================================

class EntityNotFoundError(AppException):
    """
    Raised when a lookup by id finds no live row.

    Maps to HTTP 404 Not Found.

    Attributes:
        entity: Entity name (e.g. "Rol")
        entity_id: Identifier that was looked up
    """

    def __init__(
        self,
        entity: str,
        entity_id: Any = None,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = f"{entity} with id {entity_id} was not found"
        super().__init__(
            message=message,
            status_code=404,
        )
        self.entity = entity
        self.entity_id = entity_id


# ==============================================================================
# DEPENDENCY EXCEPTIONS
# ==============================================================================

class ExternalServiceError(AppException):
    """
    Raised when a collaborator (the database) fails unexpectedly.

    Maps to HTTP 500. The original exception is kept on `cause` and is
    also chained through `raise ... from`.

    Attributes:
        service: Name of the failing collaborator
        cause: Underlying exception
    """

    def __init__(
        self,
        service: str,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
        )
        self.service = service
        self.cause = cause


class DatabaseError(AppException):
    """
    Raised when a database adapter cannot be initialised or reached.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            details=details,
        )
