"""Notification adapters for role lifecycle events."""

from rolehex.core.config import Settings
from rolehex.domain.ports.notification import RoleNotificationPort
from rolehex.infrastructure.notification.logging_notifier import LoggingRoleNotifier
from rolehex.infrastructure.notification.webhook_notifier import WebhookRoleNotifier


def build_role_notifier(settings: Settings) -> RoleNotificationPort:
    """Pick the notifier for the configured environment.

    Args:
        settings: Application settings.

    Returns:
        A webhook notifier if a notification service URL is configured,
        otherwise a logging notifier.
    """
    if settings.notification_service_url:
        return WebhookRoleNotifier(
            settings.notification_service_url,
            timeout=settings.notification_timeout_seconds,
        )
    return LoggingRoleNotifier()


__all__ = [
    "LoggingRoleNotifier",
    "WebhookRoleNotifier",
    "build_role_notifier",
]
