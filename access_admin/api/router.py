# ==============================================================================
# MAIN API ROUTER - Route Aggregation
# ==============================================================================
# Combines all entity routers under the API prefix
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from access_admin.core.settings import settings
from access_admin.api.routes import (
    form_router,
    module_form_router,
    module_router,
    permission_router,
    person_router,
    rol_form_permission_router,
    rol_router,
    rol_user_router,
    user_router,
)

# Create main API router
api_router = APIRouter()

for entity_router in (
    person_router,
    user_router,
    rol_router,
    permission_router,
    form_router,
    module_router,
    rol_user_router,
    module_form_router,
    rol_form_permission_router,
):
    api_router.include_router(entity_router, prefix=settings.API_PREFIX)
