"""Unit tests for role notification adapters."""

import json
from datetime import datetime, timezone
from unittest.mock import patch

import httpx
import pytest

from rolehex.core.config import Settings
from rolehex.domain.entities.role import Role
from rolehex.infrastructure.notification import (
    LoggingRoleNotifier,
    WebhookRoleNotifier,
    build_role_notifier,
)

ROLE = Role(
    name="BILLING_CLERK",
    id=7,
    created_at=datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc),
)


def _recording_transport(requests: list[httpx.Request], status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, json={"ok": status_code < 400})

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_webhook_posts_created_event():
    requests: list[httpx.Request] = []
    notifier = WebhookRoleNotifier(
        "http://notify.local/", transport=_recording_transport(requests)
    )

    await notifier.on_created(ROLE)

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == "http://notify.local/api/notify"
    body = json.loads(request.content)
    assert body["event"] == "role.created"
    assert body["role_id"] == 7
    assert body["role"] == {
        "id": 7,
        "name": "BILLING_CLERK",
        "created_at": "2024-06-01T09:00:00+00:00",
    }
    assert "occurred_at" in body


@pytest.mark.asyncio
async def test_webhook_posts_updated_and_deleted_events():
    requests: list[httpx.Request] = []
    notifier = WebhookRoleNotifier("http://notify.local", transport=_recording_transport(requests))

    await notifier.on_updated(ROLE)
    await notifier.on_deleted(7)

    updated, deleted = (json.loads(r.content) for r in requests)
    assert updated["event"] == "role.updated"
    assert updated["role"]["name"] == "BILLING_CLERK"
    assert deleted["event"] == "role.deleted"
    assert deleted["role_id"] == 7
    assert deleted["role"] is None


@pytest.mark.asyncio
async def test_webhook_error_status_raises():
    notifier = WebhookRoleNotifier(
        "http://notify.local", transport=_recording_transport([], status_code=500)
    )

    with pytest.raises(httpx.HTTPStatusError):
        await notifier.on_deleted(1)


@pytest.mark.asyncio
async def test_logging_notifier_logs_events():
    notifier = LoggingRoleNotifier()

    with patch("rolehex.infrastructure.notification.logging_notifier.logger") as mock_logger:
        await notifier.on_created(ROLE)
        await notifier.on_updated(ROLE)
        await notifier.on_deleted(7)

    messages = [call.args[0] for call in mock_logger.info.call_args_list]
    assert messages == [
        "Role created notification",
        "Role updated notification",
        "Role deleted notification",
    ]
    assert mock_logger.info.call_args_list[0].kwargs["role_name"] == "BILLING_CLERK"


def test_build_role_notifier_without_url():
    assert isinstance(build_role_notifier(Settings()), LoggingRoleNotifier)


def test_build_role_notifier_with_url():
    settings = Settings(
        notification_service_url="http://notify.local/",
        notification_timeout_seconds=2.5,
    )

    notifier = build_role_notifier(settings)

    assert isinstance(notifier, WebhookRoleNotifier)
    assert notifier.notify_url == "http://notify.local/api/notify"
    assert notifier.timeout == 2.5
