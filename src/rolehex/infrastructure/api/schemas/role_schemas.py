"""Role API schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, field_validator

from rolehex.domain.entities.role import Role


class CreateRoleRequest(BaseModel):
    """Request schema for creating a role.

    Attributes:
        name: Role name (e.g., 'billing_clerk'). Stored uppercased.
    """

    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        """Validate that name is not empty."""
        if not v or not v.strip():
            raise ValueError("Role name cannot be empty")
        return v


class UpdateRoleRequest(BaseModel):
    """Request schema for renaming a role.

    Attributes:
        name: New role name.
    """

    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        """Validate that name is not empty."""
        if not v or not v.strip():
            raise ValueError("Role name cannot be empty")
        return v


class RoleResponse(BaseModel):
    """Response schema for a role.

    Attributes:
        id: Role ID.
        name: Canonical role name.
        created_at: Creation timestamp.
        is_system_role: Whether the role is protected from update and deletion.
    """

    id: int
    name: str
    created_at: datetime
    is_system_role: bool

    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponse":
        """Build a response from a persisted role."""
        return cls(
            id=role.id,
            name=role.name,
            created_at=role.created_at,
            is_system_role=role.is_system_role(),
        )


class RoleListResponse(BaseModel):
    """Response schema for listing roles.

    Attributes:
        items: List of roles.
        total: Number of roles in the list.
    """

    items: list[RoleResponse]
    total: int

    @classmethod
    def from_entities(cls, roles: list[Role]) -> "RoleListResponse":
        items = [RoleResponse.from_entity(role) for role in roles]
        return cls(items=items, total=len(items))


class RoleCountResponse(BaseModel):
    """Response schema for the role count."""

    count: int


class RoleExistsResponse(BaseModel):
    """Response schema for a role existence check.

    Attributes:
        name: Canonical name that was checked.
        exists: Whether a role with that name exists.
    """

    name: str
    exists: bool


class ErrorResponse(BaseModel):
    """Error body returned for role business-rule failures.

    Attributes:
        error: Error kind (e.g., 'already_exists', 'forbidden').
        detail: Human-readable error message.
    """

    error: str
    detail: str
