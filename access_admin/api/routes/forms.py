# ==============================================================================
# FORM ENDPOINTS - CRUD and Persistence Provider Selection
# ==============================================================================

from __future__ import annotations

import logging

from fastapi import APIRouter, Body

from access_admin.api.crud_router import add_crud_routes
from access_admin.api.dependencies import FormProviderDep, get_form_service
from access_admin.core.constants import SuccessMessages
from access_admin.core.exceptions import ValidationError
from access_admin.schemas import FormDto, ProviderResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Form", tags=["Form"])


# Literal paths first so they are not captured by /{id}

@router.post(
    "/SetProvider",
    response_model=ProviderResponse,
    summary="Switch the Form persistence provider",
    description=(
        "Body is a JSON string: postgresql, mysql, sqlserver or sqlite. "
        "Requests already running keep the provider they started with."
    ),
)
async def set_provider(
    selector: FormProviderDep,
    provider: str = Body(..., examples=["mysql"]),
) -> ProviderResponse:
    """Switch the provider used by subsequent Form requests."""
    try:
        selected = selector.set_provider(provider)
    except ValueError as e:
        logger.warning(f"Rejected provider switch: {e}")
        raise ValidationError(str(e), field="provider") from e

    return ProviderResponse(
        provider=selected.value,
        message=SuccessMessages.PROVIDER_CHANGED.format(provider=selected.value),
    )


@router.get(
    "/Provider",
    response_model=ProviderResponse,
    response_model_exclude_none=True,
    summary="Get the Form persistence provider",
)
async def get_provider(selector: FormProviderDep) -> ProviderResponse:
    """Get the provider new Form requests will use."""
    return ProviderResponse(provider=selector.current.value)


add_crud_routes(router, "Form", FormDto, get_form_service)
