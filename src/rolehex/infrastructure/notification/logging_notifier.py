"""Notifier that records role events in the application log."""

from rolehex.core.logging import get_logger
from rolehex.domain.entities.role import Role
from rolehex.domain.ports.notification import RoleNotificationPort

logger = get_logger(__name__)


class LoggingRoleNotifier(RoleNotificationPort):
    """Writes one structured log entry per role event.

    Used when no notification service is configured.
    """

    async def on_created(self, role: Role) -> None:
        logger.info(
            "Role created notification",
            role_id=role.id,
            role_name=role.name,
            created_at=role.created_at.isoformat(),
        )

    async def on_updated(self, role: Role) -> None:
        logger.info(
            "Role updated notification",
            role_id=role.id,
            role_name=role.name,
            created_at=role.created_at.isoformat(),
        )

    async def on_deleted(self, role_id: int) -> None:
        logger.info("Role deleted notification", role_id=role_id)
