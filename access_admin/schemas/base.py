# ==============================================================================
# BASE SCHEMAS - Common Schema Patterns
# ==============================================================================
# Foundation DTO configuration and shared response shapes
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All DTOs inherit from this class so the wire format is uniform:
    responses use camelCase keys, and request keys bind to fields
    regardless of case (`Role`, `role` and `ROLE` all fill `role`).
    """

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
    )

    @model_validator(mode="before")
    @classmethod
    def bind_keys_case_insensitively(cls, data: Any) -> Any:
        """Rename incoming keys to the field alias they match ignoring case."""
        if not isinstance(data, dict):
            return data

        lookup: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            lookup[name.lower()] = alias
            lookup[alias.lower()] = alias

        bound: Dict[str, Any] = {}
        for key, value in data.items():
            target = lookup.get(key.lower(), key) if isinstance(key, str) else key
            bound.setdefault(target, value)
        return bound


class MessageResponse(BaseSchema):
    """Confirmation body returned by delete endpoints."""

    message: str = Field(
        ...,
        description="Human-readable outcome",
    )


class ProviderResponse(BaseSchema):
    """Active Form persistence provider."""

    provider: str = Field(
        ...,
        description="Provider name (postgresql, mysql, sqlserver, sqlite)",
    )
    message: Optional[str] = Field(
        None,
        description="Status message after a switch",
    )


class HealthResponse(BaseSchema):
    """Health check response schema."""

    status: str = Field(
        ...,
        description="Health status"
    )
    version: str = Field(
        ...,
        description="Application version"
    )
    database: str = Field(
        ...,
        description="Database connection status"
    )
