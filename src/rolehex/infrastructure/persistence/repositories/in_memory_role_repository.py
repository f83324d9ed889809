"""In-memory role repository.

Keeps roles in a dict keyed by ID. Useful for embedding the role service
without a database and for tests. There is no unique name constraint here;
uniqueness relies on the role service's check before writing.
"""

from rolehex.domain.entities.role import Role
from rolehex.domain.exceptions import RoleNotFoundError
from rolehex.domain.ports.role_repository import RoleRepositoryPort


class InMemoryRoleRepository(RoleRepositoryPort):
    """Dict-backed implementation of the role repository port."""

    def __init__(self, roles: list[Role] | None = None) -> None:
        """Initialize the repository.

        Args:
            roles: Optional roles to preload. Roles without an ID get one;
                roles with an ID keep it.
        """
        self._roles: dict[int, Role] = {}
        self._last_id = 0
        for role in roles or []:
            self._store(role)

    def _store(self, role: Role) -> Role:
        # IDs are never reused, including preloaded and deleted ones
        if role.id is None:
            role = Role(name=role.name, id=self._last_id + 1, created_at=role.created_at)
        self._last_id = max(self._last_id, role.id)
        self._roles[role.id] = role
        return role

    async def save(self, role: Role) -> Role:
        """Insert or update a role.

        Args:
            role: Role to store. Roles without an ID are inserted.

        Returns:
            The stored role.

        Raises:
            RoleNotFoundError: If an update targets an unknown ID.
        """
        if role.id is not None and role.id not in self._roles:
            raise RoleNotFoundError(role.id)
        return self._store(role)

    async def find_by_id(self, role_id: int) -> Role | None:
        """Get a role by ID, or None if it does not exist."""
        return self._roles.get(role_id)

    async def find_by_name(self, name: str) -> Role | None:
        """Get a role by canonical name, or None if it does not exist."""
        return next((role for role in self._roles.values() if role.name == name), None)

    async def find_all(self) -> list[Role]:
        """List all roles ordered by ID."""
        return [self._roles[role_id] for role_id in sorted(self._roles)]

    async def find_by_name_containing(self, pattern: str) -> list[Role]:
        """List roles whose name contains the pattern, ignoring case."""
        needle = pattern.upper()
        return [role for role in await self.find_all() if needle in role.name.upper()]

    async def delete_by_id(self, role_id: int) -> bool:
        """Delete a role by ID.

        Returns:
            True if a role was deleted, False otherwise.
        """
        return self._roles.pop(role_id, None) is not None

    async def exists_by_name(self, name: str) -> bool:
        """Check whether a role with the canonical name exists."""
        return await self.find_by_name(name) is not None

    async def count(self) -> int:
        """Count all roles."""
        return len(self._roles)
