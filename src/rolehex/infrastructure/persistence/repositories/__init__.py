"""Persistence repositories for role storage."""

from rolehex.infrastructure.persistence.repositories.in_memory_role_repository import (
    InMemoryRoleRepository,
)
from rolehex.infrastructure.persistence.repositories.role_repository import (
    SQLAlchemyRoleRepository,
)

__all__ = [
    "InMemoryRoleRepository",
    "SQLAlchemyRoleRepository",
]
