"""Notification sink. Delivery is advisory: failures are logged, never raised."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ironlog.core.constants import NOTIFICATION_TITLE
from ironlog.core.enums import NotificationPermission

logger = logging.getLogger(__name__)


def request_permission(
    current: NotificationPermission,
    requested: NotificationPermission,
) -> NotificationPermission:
    """Only an undecided permission can change; granted/denied are sticky."""
    if current == NotificationPermission.DEFAULT:
        return requested
    return current


class NotificationSink:
    """Logs notifications. Swap in a push/web-push sender by overriding ``deliver``."""

    def deliver(self, user_id: str, title: str, body: str) -> None:
        logger.info("Notify %s: %s - %s", user_id, title, body)

    def notify(self, user_id: str, permission: NotificationPermission | str, title: str, body: str) -> bool:
        """Send one notification. No-op unless permission is granted. Returns True if delivered."""
        if NotificationPermission(permission) != NotificationPermission.GRANTED:
            return False
        try:
            self.deliver(user_id, title, body)
        except Exception:
            logger.warning("Notification to %s failed", user_id, exc_info=True)
            return False
        return True

    def notify_all(
        self,
        user_id: str,
        permission: NotificationPermission | str,
        messages: Iterable[str],
        title: str = NOTIFICATION_TITLE,
    ) -> int:
        """One notification per celebration message; returns how many went out."""
        return sum(1 for message in messages if self.notify(user_id, permission, title, message))
