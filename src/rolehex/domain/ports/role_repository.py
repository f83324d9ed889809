"""Persistence port for roles."""

from abc import ABC, abstractmethod

from rolehex.domain.entities.role import Role


class RoleRepositoryPort(ABC):
    """Abstract base class for role storage adapters.

    Names passed to the lookup methods are already canonical.
    """

    @abstractmethod
    async def save(self, role: Role) -> Role:
        """Insert a new role (no ID) or update an existing one.

        Returns:
            The stored role, with its ID assigned.
        """
        ...

    @abstractmethod
    async def find_by_id(self, role_id: int) -> Role | None:
        """Get a role by ID."""
        ...

    @abstractmethod
    async def find_by_name(self, name: str) -> Role | None:
        """Get a role by canonical name."""
        ...

    @abstractmethod
    async def find_all(self) -> list[Role]:
        """List every stored role."""
        ...

    @abstractmethod
    async def find_by_name_containing(self, pattern: str) -> list[Role]:
        """List roles whose name contains ``pattern``, ignoring case."""
        ...

    @abstractmethod
    async def delete_by_id(self, role_id: int) -> bool:
        """Delete a role.

        Returns:
            True if a role was removed, False if the ID no longer existed.
        """
        ...

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Check whether a role with the canonical name exists."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Count stored roles."""
        ...
