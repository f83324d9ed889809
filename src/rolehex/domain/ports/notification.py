"""Notification port for role lifecycle events."""

from abc import ABC, abstractmethod

from rolehex.domain.entities.role import Role


class RoleNotificationPort(ABC):
    """One-way sink for role lifecycle events.

    Implementations may fail; the domain service never lets those failures
    reach the caller of the mutation that triggered them.
    """

    @abstractmethod
    async def on_created(self, role: Role) -> None:
        """Publish that a role was created."""
        ...

    @abstractmethod
    async def on_updated(self, role: Role) -> None:
        """Publish that a role was renamed."""
        ...

    @abstractmethod
    async def on_deleted(self, role_id: int) -> None:
        """Publish that a role was deleted."""
        ...
