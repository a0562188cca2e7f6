# ==============================================================================
# ROUTES PACKAGE INITIALIZATION
# ==============================================================================

from access_admin.api.routes.catalog import (
    module_router,
    permission_router,
    person_router,
    rol_router,
    user_router,
)
from access_admin.api.routes.forms import router as form_router
from access_admin.api.routes.assignments import (
    module_form_router,
    rol_form_permission_router,
    rol_user_router,
)

__all__ = [
    "person_router",
    "user_router",
    "rol_router",
    "permission_router",
    "module_router",
    "form_router",
    "rol_user_router",
    "module_form_router",
    "rol_form_permission_router",
]
