"""Notifier that posts role events to an external notification service.

Each event is sent as a JSON POST to ``<base_url>/api/notify``:

    {
        "event": "role.created",
        "role_id": 7,
        "role": {"id": 7, "name": "BILLING_CLERK", "created_at": "..."},
        "occurred_at": "..."
    }

Deletions carry ``"role": null``. A non-2xx response raises, which the
notification dispatcher logs.
"""

from datetime import datetime, timezone
from typing import Any

import httpx

from rolehex.core.logging import get_logger
from rolehex.domain.entities.role import Role
from rolehex.domain.ports.notification import RoleNotificationPort

logger = get_logger(__name__)

NOTIFY_PATH = "/api/notify"


def _role_payload(role: Role) -> dict[str, Any]:
    return {
        "id": role.id,
        "name": role.name,
        "created_at": role.created_at.isoformat(),
    }


class WebhookRoleNotifier(RoleNotificationPort):
    """Sends role events to a notification service over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the notifier.

        Args:
            base_url: Base URL of the notification service.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (e.g., a mock transport in tests).
        """
        self.notify_url = base_url.rstrip("/") + NOTIFY_PATH
        self.timeout = timeout
        self.transport = transport

    async def _post(self, event: str, role_id: int | None, role: Role | None) -> None:
        body = {
            "event": event,
            "role_id": role_id,
            "role": _role_payload(role) if role is not None else None,
            "occurred_at": datetime.now(timezone.utc).isoformat(),
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(self.notify_url, json=body)
            response.raise_for_status()

        logger.debug(
            "Role notification sent",
            notification_event=event,
            role_id=role_id,
            status_code=response.status_code,
        )

    async def on_created(self, role: Role) -> None:
        await self._post("role.created", role.id, role)

    async def on_updated(self, role: Role) -> None:
        await self._post("role.updated", role.id, role)

    async def on_deleted(self, role_id: int) -> None:
        await self._post("role.deleted", role_id, None)
