# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""In-app notification channel.

Keeps notification records in memory for display in the application's
notification center. Hosts with a database replace this sender with one
that writes to their store.
"""

import threading

from schoolcore.infrastructure.notifications.channels.base import (
    ChannelType,
    NotificationSender,
)
from schoolcore.models.common import NotificationType
from schoolcore.models.notification import Notification


class InAppNotificationSender(NotificationSender):
    """In-memory in-app notification channel."""

    def __init__(self) -> None:
        """Initialize the in-app channel."""
        super().__init__()
        self._notifications: list[Notification] = []
        self._lock = threading.Lock()

    @property
    def channel_type(self) -> ChannelType:
        """Return the channel type."""
        return ChannelType.IN_APP

    async def send(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
    ) -> Notification:
        """Store an in-app notification record."""
        notification = self.build_notification(user_id, title, message, type)
        self.store(notification)
        return notification

    def store(self, notification: Notification) -> None:
        """Keep an already prepared notification."""
        with self._lock:
            self._notifications.append(notification)

        self.logger.info(
            "Created in-app notification %s for user %s",
            notification.id,
            notification.user_id,
        )

    def list_for(self, user_id: str, unread_only: bool = False) -> list[Notification]:
        """List a user's notifications, newest first."""
        with self._lock:
            items = [
                n
                for n in self._notifications
                if n.user_id == user_id and not (unread_only and n.is_read)
            ]
        return sorted(items, key=lambda n: n.created_at, reverse=True)

    def unread_count(self, user_id: str) -> int:
        """Count a user's unread notifications."""
        return len(self.list_for(user_id, unread_only=True))

    def mark_as_read(self, notification_id: str) -> bool:
        """Mark one notification as read.

        Returns:
            True if the notification was found.
        """
        with self._lock:
            for notification in self._notifications:
                if notification.id == notification_id:
                    notification.is_read = True
                    return True
        return False

    def delete(self, notification_id: str) -> bool:
        """Delete one notification.

        Returns:
            True if the notification was found and removed.
        """
        with self._lock:
            before = len(self._notifications)
            self._notifications = [n for n in self._notifications if n.id != notification_id]
            return len(self._notifications) < before
