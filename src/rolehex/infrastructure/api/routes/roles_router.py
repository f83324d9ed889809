"""Roles API routes.

Routes translate HTTP requests into role service calls. Business-rule
failures raised by the service are turned into responses by the
``RoleError`` handler registered in ``app.py``.
"""

from fastapi import APIRouter, HTTPException, Query, status

from rolehex.core.logging import get_logger
from rolehex.domain.entities.role import normalize_role_name
from rolehex.infrastructure.api.dependencies import RoleServiceDep
from rolehex.infrastructure.api.schemas import (
    CreateRoleRequest,
    ErrorResponse,
    RoleCountResponse,
    RoleExistsResponse,
    RoleListResponse,
    RoleResponse,
    UpdateRoleRequest,
)

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=RoleResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid role name"},
        409: {"model": ErrorResponse, "description": "Role name already exists"},
    },
)
async def create_role(role_request: CreateRoleRequest, role_service: RoleServiceDep) -> RoleResponse:
    """Create a new role.

    The name is stored trimmed and uppercased.
    """
    role = await role_service.create_role(role_request.name)
    return RoleResponse.from_entity(role)


@router.get("", status_code=status.HTTP_200_OK, response_model=RoleListResponse)
async def list_roles(role_service: RoleServiceDep) -> RoleListResponse:
    """List all roles."""
    roles = await role_service.get_all_roles()
    logger.debug("Roles listed", count=len(roles))
    return RoleListResponse.from_entities(roles)


@router.get(
    "/search",
    status_code=status.HTTP_200_OK,
    response_model=RoleListResponse,
    responses={400: {"model": ErrorResponse, "description": "Blank search pattern"}},
)
async def search_roles(
    role_service: RoleServiceDep,
    name: str = Query(..., description="Case-insensitive substring of the role name"),
) -> RoleListResponse:
    """Search roles whose name contains the given pattern."""
    roles = await role_service.search_roles_by_name(name)
    logger.debug("Roles searched", pattern=name, count=len(roles))
    return RoleListResponse.from_entities(roles)


@router.get("/count", status_code=status.HTTP_200_OK, response_model=RoleCountResponse)
async def count_roles(role_service: RoleServiceDep) -> RoleCountResponse:
    """Get the total number of roles."""
    return RoleCountResponse(count=await role_service.get_role_count())


@router.get("/exists", status_code=status.HTTP_200_OK, response_model=RoleExistsResponse)
async def role_exists(
    role_service: RoleServiceDep,
    name: str = Query(..., description="Role name, any case"),
) -> RoleExistsResponse:
    """Check whether a role with the given name exists."""
    exists = await role_service.role_exists(name)
    return RoleExistsResponse(name=normalize_role_name(name), exists=exists)


@router.get(
    "/by-name/{name}",
    status_code=status.HTTP_200_OK,
    response_model=RoleResponse,
    responses={404: {"description": "Role not found"}},
)
async def get_role_by_name(name: str, role_service: RoleServiceDep) -> RoleResponse:
    """Get a role by name (any case)."""
    role = await role_service.get_role_by_name(name)
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Role with name '{normalize_role_name(name)}' not found",
        )
    return RoleResponse.from_entity(role)


@router.get(
    "/{role_id}",
    status_code=status.HTTP_200_OK,
    response_model=RoleResponse,
    responses={404: {"description": "Role not found"}},
)
async def get_role(role_id: int, role_service: RoleServiceDep) -> RoleResponse:
    """Get a role by ID."""
    role = await role_service.get_role_by_id(role_id)
    if role is None:
        logger.info("Role not found", role_id=role_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Role with ID {role_id} not found",
        )
    return RoleResponse.from_entity(role)


@router.put(
    "/{role_id}",
    status_code=status.HTTP_200_OK,
    response_model=RoleResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid role name"},
        403: {"model": ErrorResponse, "description": "System roles cannot be updated"},
        404: {"model": ErrorResponse, "description": "Role not found"},
        409: {"model": ErrorResponse, "description": "Role name already exists"},
    },
)
async def update_role(
    role_id: int,
    role_request: UpdateRoleRequest,
    role_service: RoleServiceDep,
) -> RoleResponse:
    """Rename a role. System roles cannot be renamed."""
    role = await role_service.update_role(role_id, role_request.name)
    return RoleResponse.from_entity(role)


@router.delete(
    "/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        403: {"model": ErrorResponse, "description": "System roles cannot be deleted"},
        404: {"model": ErrorResponse, "description": "Role not found"},
    },
)
async def delete_role(role_id: int, role_service: RoleServiceDep) -> None:
    """Delete a role. System roles cannot be deleted."""
    await role_service.delete_role(role_id)
