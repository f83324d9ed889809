"""Fire-and-forget dispatch of role notifications.

Notifications run as background asyncio tasks. The dispatcher keeps a strong
reference to every in-flight task (the event loop only holds weak ones) and
contains every failure: a notification that raises is logged, never re-raised.
"""

import asyncio
from typing import Any, Awaitable, Callable

from rolehex.core.logging import get_logger

logger = get_logger(__name__)


class NotificationDispatcher:
    """Schedules notification calls without letting callers wait on them.

    Example:
        dispatcher = NotificationDispatcher()
        dispatcher.submit("role.created", lambda: notifier.on_created(role))
        ...
        await dispatcher.drain()  # on shutdown
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of notifications still in flight."""
        return len(self._tasks)

    def submit(
        self,
        event: str,
        send: Callable[[], Awaitable[None]],
        **context: Any,
    ) -> asyncio.Task | None:
        """Schedule a notification on the running event loop.

        Args:
            event: Event name used for logging (e.g., "role.created").
            send: Zero-argument callable returning the notification awaitable.
            **context: Extra key-value pairs added to log entries.

        Returns:
            The scheduled task, or None if scheduling failed.
        """
        coro = self._run(event, send, context)
        try:
            task = asyncio.create_task(coro)
        except RuntimeError as e:
            coro.close()
            logger.error(
                "Failed to schedule notification",
                notification_event=event,
                error=str(e),
                **context,
            )
            return None

        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        logger.debug("Notification scheduled", notification_event=event, **context)
        return task

    async def _run(
        self,
        event: str,
        send: Callable[[], Awaitable[None]],
        context: dict[str, Any],
    ) -> None:
        try:
            await send()
        except Exception as e:
            logger.error(
                "Notification delivery failed",
                notification_event=event,
                error=str(e),
                exc_type=type(e).__name__,
                **context,
            )
        else:
            logger.debug("Notification delivered", notification_event=event, **context)

    async def drain(self) -> None:
        """Wait until every in-flight notification has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
