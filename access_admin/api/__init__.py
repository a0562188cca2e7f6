# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

"""
API Module
==========

FastAPI routers and endpoint definitions:
- Dependencies: Database access, per-entity services
- CRUD router factory: Uniform entity endpoints
- Routes: Catalog entities, Form (with provider selection), assignments
"""

from access_admin.api.router import api_router

__all__ = ["api_router"]
