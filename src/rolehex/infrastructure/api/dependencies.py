"""FastAPI dependencies for wiring the role service.

The repository is bound to the request's database session; the notifier and
the notification dispatcher are application-wide and live on ``app.state``.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from rolehex.core.config import get_settings
from rolehex.domain.ports.notification import RoleNotificationPort
from rolehex.domain.ports.role_repository import RoleRepositoryPort
from rolehex.domain.services import NotificationDispatcher, RoleService
from rolehex.infrastructure.persistence.database import get_db_session
from rolehex.infrastructure.persistence.repositories import SQLAlchemyRoleRepository


def get_role_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> RoleRepositoryPort:
    """Build a role repository bound to the request's session."""
    return SQLAlchemyRoleRepository(session)


def get_role_notifier(request: Request) -> RoleNotificationPort:
    """Get the application-wide role notifier."""
    return request.app.state.role_notifier


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    """Get the application-wide notification dispatcher."""
    return request.app.state.notification_dispatcher


def get_role_service(
    role_repository: Annotated[RoleRepositoryPort, Depends(get_role_repository)],
    notifier: Annotated[RoleNotificationPort, Depends(get_role_notifier)],
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
) -> RoleService:
    """Build the role service for a request."""
    return RoleService(
        role_repository,
        notifier,
        dispatcher,
        guard_reserved_renames=get_settings().guard_reserved_renames,
    )


RoleServiceDep = Annotated[RoleService, Depends(get_role_service)]
