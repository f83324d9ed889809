"""Domain entities for RoleHex.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from rolehex.domain.entities.role import (
    MAX_NAME_LENGTH,
    RESERVED_ROLE_NAMES,
    SYSTEM_ROLE_PREFIX,
    Role,
    is_system_role_name,
    normalize_role_name,
)

__all__ = [
    "MAX_NAME_LENGTH",
    "RESERVED_ROLE_NAMES",
    "SYSTEM_ROLE_PREFIX",
    "Role",
    "is_system_role_name",
    "normalize_role_name",
]
