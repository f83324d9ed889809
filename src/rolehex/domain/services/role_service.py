"""Role service for business logic.

The role service is the only place where role business rules are enforced:
- canonical names are unique
- system roles can be neither renamed nor deleted
- notifications are sent only after the repository accepted the change,
  and never influence the outcome of the operation

Storage errors raised by the repository are not caught here.
"""

from rolehex.core.logging import get_logger
from rolehex.domain.entities.role import Role, normalize_role_name
from rolehex.domain.exceptions import (
    InvalidArgumentError,
    RoleAlreadyExistsError,
    RoleNotFoundError,
    SystemRoleError,
)
from rolehex.domain.ports.notification import RoleNotificationPort
from rolehex.domain.ports.role_repository import RoleRepositoryPort
from rolehex.domain.services.notification_dispatcher import NotificationDispatcher

logger = get_logger(__name__)


class RoleService:
    """Service for role management business logic."""

    def __init__(
        self,
        role_repository: RoleRepositoryPort,
        notifier: RoleNotificationPort,
        dispatcher: NotificationDispatcher | None = None,
        guard_reserved_renames: bool = False,
    ) -> None:
        """Initialize the role service.

        Args:
            role_repository: Storage adapter for roles.
            notifier: Sink for role lifecycle events.
            dispatcher: Background dispatcher for notifications. A private one
                is created if not provided.
            guard_reserved_renames: If True, renaming a role to a system role
                name is rejected as well.
        """
        self.role_repository = role_repository
        self.notifier = notifier
        self.dispatcher = dispatcher or NotificationDispatcher()
        self.guard_reserved_renames = guard_reserved_renames

    # Commands

    async def create_role(self, name: str) -> Role:
        """Create a new role.

        Args:
            name: Raw role name; stored trimmed and uppercased.

        Returns:
            The persisted role, with its ID.

        Raises:
            InvalidRoleNameError: If the name is blank or too long.
            RoleAlreadyExistsError: If a role with the canonical name exists.
        """
        role = Role.create(name)

        if await self.role_repository.exists_by_name(role.name):
            logger.info("Role creation failed: name already exists", role_name=role.name)
            raise RoleAlreadyExistsError(role.name)

        saved = await self.role_repository.save(role)

        logger.info("Role created", role_id=saved.id, role_name=saved.name)
        self.dispatcher.submit(
            "role.created",
            lambda: self.notifier.on_created(saved),
            role_id=saved.id,
        )
        return saved

    async def update_role(self, role_id: int, new_name: str) -> Role:
        """Rename a role.

        The system role check is made against the current name, before the
        new name is looked at.

        Args:
            role_id: Role ID.
            new_name: Raw new name.

        Returns:
            The persisted, renamed role.

        Raises:
            RoleNotFoundError: If the role does not exist.
            SystemRoleError: If the role is a system role.
            InvalidRoleNameError: If the new name is blank or too long.
            RoleAlreadyExistsError: If another role already has the new name.
        """
        existing = await self.role_repository.find_by_id(role_id)
        if existing is None:
            logger.info("Role update failed: role not found", role_id=role_id)
            raise RoleNotFoundError(role_id)

        if existing.is_system_role():
            logger.warning(
                "Role update rejected: system role",
                role_id=role_id,
                role_name=existing.name,
            )
            raise SystemRoleError("update", existing.name)

        renamed = existing.with_name(new_name)

        if self.guard_reserved_renames and renamed.is_system_role():
            logger.warning(
                "Role update rejected: new name is reserved",
                role_id=role_id,
                role_name=renamed.name,
            )
            raise SystemRoleError("rename a role to", renamed.name)

        holder = await self.role_repository.find_by_name(renamed.name)
        if holder is not None and holder.id != role_id:
            logger.info(
                "Role update failed: name already exists",
                role_id=role_id,
                role_name=renamed.name,
            )
            raise RoleAlreadyExistsError(renamed.name)

        saved = await self.role_repository.save(renamed)

        logger.info(
            "Role updated",
            role_id=saved.id,
            old_name=existing.name,
            role_name=saved.name,
        )
        self.dispatcher.submit(
            "role.updated",
            lambda: self.notifier.on_updated(saved),
            role_id=saved.id,
        )
        return saved

    async def delete_role(self, role_id: int) -> None:
        """Delete a role.

        Args:
            role_id: Role ID.

        Raises:
            RoleNotFoundError: If the role does not exist, including when it
                disappears between the lookup and the delete.
            SystemRoleError: If the role is a system role.
        """
        role = await self.role_repository.find_by_id(role_id)
        if role is None:
            logger.info("Role deletion failed: role not found", role_id=role_id)
            raise RoleNotFoundError(role_id)

        if role.is_system_role():
            logger.warning(
                "Role deletion rejected: system role",
                role_id=role_id,
                role_name=role.name,
            )
            raise SystemRoleError("delete", role.name)

        if not await self.role_repository.delete_by_id(role_id):
            logger.info("Role deletion failed: role vanished", role_id=role_id)
            raise RoleNotFoundError(role_id, f"Role with ID {role_id} could not be deleted")

        logger.info("Role deleted", role_id=role_id, role_name=role.name)
        self.dispatcher.submit(
            "role.deleted",
            lambda: self.notifier.on_deleted(role_id),
            role_id=role_id,
        )

    # Queries

    async def get_role_by_id(self, role_id: int) -> Role | None:
        """Get a role by ID, or None if it does not exist."""
        return await self.role_repository.find_by_id(role_id)

    async def get_role_by_name(self, name: str) -> Role | None:
        """Get a role by name (any case/whitespace), or None if it does not exist."""
        canonical = normalize_role_name(name)
        if not canonical:
            return None
        return await self.role_repository.find_by_name(canonical)

    async def get_all_roles(self) -> list[Role]:
        """List all roles."""
        return await self.role_repository.find_all()

    async def search_roles_by_name(self, pattern: str) -> list[Role]:
        """Find roles whose name contains ``pattern``, ignoring case.

        Raises:
            InvalidArgumentError: If the pattern is blank.
        """
        if pattern is None or not pattern.strip():
            raise InvalidArgumentError("Search pattern cannot be blank")
        return await self.role_repository.find_by_name_containing(pattern.strip())

    async def get_role_count(self) -> int:
        """Count all roles."""
        return await self.role_repository.count()

    async def role_exists(self, name: str) -> bool:
        """Check whether a role with the given name (any case/whitespace) exists."""
        canonical = normalize_role_name(name)
        if not canonical:
            return False
        return await self.role_repository.exists_by_name(canonical)

