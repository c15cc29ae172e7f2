# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Notification dispatcher for delivering prepared notifications.

Domain operations return the Notification values produced by observers.
The host hands them to a NotificationDispatcher, which sends them through
one configured NotificationSender:

1. Order by presentation priority (grades first, system messages last)
2. Send each through the sender
3. Collect delivered records and per-notification errors

A failing send never stops the remaining ones.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from schoolcore.infrastructure.notifications.channels.base import NotificationSender
from schoolcore.infrastructure.notifications.presentation import presentation_for
from schoolcore.models.common import NotificationType
from schoolcore.models.notification import Notification

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Result of dispatching a batch of notifications.

    Attributes:
        sent: Records returned by the sender, in send order.
        failed: Notifications the sender did not deliver.
        errors: One error message per failed notification.
    """

    sent: list[Notification] = field(default_factory=list)
    failed: list[Notification] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether every notification was delivered."""
        return not self.failed

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible summary."""
        return {
            "sent": len(self.sent),
            "failed": len(self.failed),
            "errors": list(self.errors),
        }


class NotificationDispatcher:
    """Sends notifications through a NotificationSender.

    Attributes:
        sender: The configured delivery channel.
    """

    def __init__(self, sender: NotificationSender) -> None:
        """Initialize the dispatcher.

        Args:
            sender: Channel used for every send.
        """
        self.sender = sender
        logger.info(
            "NotificationDispatcher initialized with %s channel",
            sender.channel_type.value,
        )

    async def notify(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType = NotificationType.SYSTEM,
    ) -> Notification:
        """Send one direct notification.

        Errors from the sender propagate to the caller.

        Args:
            user_id: Recipient user id.
            title: Notification title.
            message: Notification body.
            type: Notification category.

        Returns:
            The delivered Notification record.
        """
        return await self.sender.send(user_id, title, message, type)

    async def dispatch(self, notifications: Iterable[Notification]) -> DispatchResult:
        """Send prepared notifications, most urgent first.

        Notifications of equal priority keep their input order.

        Args:
            notifications: Values returned by a domain operation.

        Returns:
            DispatchResult with delivered records and failures.
        """
        ordered = sorted(notifications, key=lambda n: presentation_for(n.type).priority)
        result = DispatchResult()

        for notification in ordered:
            try:
                sent = await self.sender.send(
                    notification.user_id,
                    notification.title,
                    notification.message,
                    notification.type,
                )
            except Exception as e:
                logger.warning(
                    "Failed to send notification %s to user %s: %s",
                    notification.id,
                    notification.user_id,
                    str(e),
                    exc_info=True,
                )
                result.failed.append(notification)
                result.errors.append(f"{notification.user_id}: {e}")
                continue

            result.sent.append(sent)

        logger.info(
            "Dispatched %d notifications via %s: %d sent, %d failed",
            len(ordered),
            self.sender.channel_type.value,
            len(result.sent),
            len(result.failed),
        )
        return result
