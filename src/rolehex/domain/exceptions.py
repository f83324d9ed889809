"""Typed failures raised by the role domain.

Every failure carries a ``kind`` so outer layers (HTTP, CLI) can pick a
response by switching on the kind instead of on the exception class.
"""

from enum import Enum


class RoleErrorKind(str, Enum):
    """Classification of role business-rule failures."""

    INVALID_NAME = "invalid_name"
    INVALID_ARGUMENT = "invalid_argument"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


class RoleError(Exception):
    """Base class for all role business-rule failures."""

    kind: RoleErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRoleNameError(RoleError, ValueError):
    """Raised when a role name is blank or too long."""

    kind = RoleErrorKind.INVALID_NAME


class InvalidArgumentError(RoleError, ValueError):
    """Raised when an operation argument is malformed (e.g. blank search pattern)."""

    kind = RoleErrorKind.INVALID_ARGUMENT


class RoleAlreadyExistsError(RoleError):
    """Raised when a canonical role name is already taken by another role."""

    kind = RoleErrorKind.ALREADY_EXISTS

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Role with name '{name}' already exists")


class RoleNotFoundError(RoleError):
    """Raised when a role ID has no persisted role."""

    kind = RoleErrorKind.NOT_FOUND

    def __init__(self, role_id: int, message: str | None = None) -> None:
        self.role_id = role_id
        super().__init__(message or f"Role with ID {role_id} not found")


class SystemRoleError(RoleError):
    """Raised when a system role is about to be updated or deleted."""

    kind = RoleErrorKind.FORBIDDEN

    def __init__(self, action: str, name: str) -> None:
        self.action = action
        self.name = name
        super().__init__(f"Cannot {action} system role: {name}")
