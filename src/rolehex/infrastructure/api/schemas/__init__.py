"""API Schemas for request/response validation."""

from rolehex.infrastructure.api.schemas.role_schemas import (
    CreateRoleRequest,
    ErrorResponse,
    RoleCountResponse,
    RoleExistsResponse,
    RoleListResponse,
    RoleResponse,
    UpdateRoleRequest,
)

__all__ = [
    "CreateRoleRequest",
    "ErrorResponse",
    "RoleCountResponse",
    "RoleExistsResponse",
    "RoleListResponse",
    "RoleResponse",
    "UpdateRoleRequest",
]
