"""Domain services for RoleHex.

Services contain business logic that doesn't naturally fit within a single entity.
They depend only on the domain ports, never on concrete adapters.
"""

from rolehex.domain.services.notification_dispatcher import NotificationDispatcher
from rolehex.domain.services.role_service import RoleService

__all__ = [
    "NotificationDispatcher",
    "RoleService",
]
