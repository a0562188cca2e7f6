# ==============================================================================
# CRUD ROUTER FACTORY - Uniform Entity Endpoints
# ==============================================================================
# Every entity exposes the same list/get/create/update/delete routes; this
# module builds them once from the DTO type and the service dependency
# ==============================================================================

# Annotations below are evaluated eagerly: FastAPI reads the concrete DTO
# type of each generated endpoint from them.

import logging
from typing import Any, Callable, List, Optional, Type

from fastapi import APIRouter, Depends, Path, Query, Response, status

from access_admin.core.constants import APIConstants
from access_admin.core.settings import settings
from access_admin.schemas.base import BaseSchema, MessageResponse
from access_admin.services.base_service import BaseService

logger = logging.getLogger(__name__)


def add_crud_routes(
    router: APIRouter,
    entity: str,
    dto_type: Type[BaseSchema],
    service_dependency: Callable[..., Any],
    soft_delete: bool = True,
) -> APIRouter:
    """
    Register the standard CRUD endpoints of an entity on a router.

    Routes are added after any already present on the router, so
    entity-specific literal paths registered first take precedence over
    `/{id}`.

    Args:
        router: Router mounted at `/{entity}`
        entity: Entity name used in the URL and the Location header
        dto_type: DTO class for bodies and responses
        service_dependency: FastAPI dependency returning the service
        soft_delete: Expose `DELETE /logico/{id}`

    Returns:
        The same router
    """

    def location(id: int) -> str:
        return f"{settings.API_PREFIX}/{entity}/{id}"

    @router.get(
        "",
        response_model=List[dto_type],
        summary=f"List {entity}",
        description=f"List {entity} records. Logically deleted rows only with includeDeleted=true.",
    )
    async def list_entities(
        include_deleted: bool = Query(False, alias="includeDeleted"),
        service: BaseService = Depends(service_dependency),
    ):
        return await service.list(include_deleted=include_deleted)

    @router.get(
        "/{id}",
        response_model=dto_type,
        summary=f"Get {entity} by ID",
    )
    async def get_entity(
        id: int = Path(...),
        service: BaseService = Depends(service_dependency),
    ):
        return await service.get_by_id(id)

    @router.post(
        "",
        response_model=dto_type,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {entity}",
    )
    async def create_entity(
        dto: dto_type,
        response: Response,
        service: BaseService = Depends(service_dependency),
    ):
        created = await service.create(dto)
        response.headers["Location"] = location(created.id)
        return created

    @router.put(
        "",
        response_model=dto_type,
        summary=f"Update {entity}",
        description="Replace the mutable fields of the record whose id is in the body.",
    )
    async def update_entity(
        dto: dto_type,
        service: BaseService = Depends(service_dependency),
    ):
        return await service.update(dto)

    @router.put(
        "/{id}",
        response_model=dto_type,
        summary=f"Update {entity} by ID",
        description="The path id takes precedence over any id in the body.",
    )
    async def update_entity_by_id(
        dto: dto_type,
        id: int = Path(...),
        service: BaseService = Depends(service_dependency),
    ):
        return await service.update(dto, id=id)

    @router.delete(
        "/{id}",
        response_model=MessageResponse,
        summary=f"Delete {entity}",
    )
    async def delete_entity(
        id: int = Path(...),
        service: BaseService = Depends(service_dependency),
    ):
        return MessageResponse(message=await service.delete(id))

    if soft_delete:
        @router.delete(
            f"/{APIConstants.LOGICAL_DELETE_SEGMENT}/{{id}}",
            response_model=MessageResponse,
            summary=f"Logically delete {entity}",
        )
        async def delete_entity_logically(
            id: int = Path(...),
            service: BaseService = Depends(service_dependency),
        ):
            return MessageResponse(message=await service.delete_logical(id))

    logger.debug(f"CRUD routes registered for {entity}")
    return router


def build_crud_router(
    entity: str,
    dto_type: Type[BaseSchema],
    service_dependency: Callable[..., Any],
    soft_delete: bool = True,
    tags: Optional[List[str]] = None,
) -> APIRouter:
    """
    Create a router at `/{entity}` with the standard CRUD endpoints.

    Example:
        >>> router = build_crud_router("Rol", RolDto, get_rol_service)
    """
    router = APIRouter(prefix=f"/{entity}", tags=tags or [entity])
    return add_crud_routes(router, entity, dto_type, service_dependency, soft_delete)
