"""Ports the role domain depends on.

Adapters in ``rolehex.infrastructure`` implement these contracts.
"""

from rolehex.domain.ports.notification import RoleNotificationPort
from rolehex.domain.ports.role_repository import RoleRepositoryPort

__all__ = [
    "RoleNotificationPort",
    "RoleRepositoryPort",
]
