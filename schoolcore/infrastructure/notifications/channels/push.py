# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Push notification sender.

Push tokens are resolved from user ids by the injected address
resolver; the PushNotificationService owns device registration and
the provider API.
"""

from schoolcore.infrastructure.notifications.channels.base import (
    AddressResolver,
    ChannelType,
    NotificationSender,
    PushNotificationService,
)
from schoolcore.models.common import NotificationType
from schoolcore.models.notification import Notification


class PushNotificationAdapter(NotificationSender):
    """Sends notifications through a PushNotificationService."""

    def __init__(
        self,
        push_service: PushNotificationService,
        resolve_address: AddressResolver | None = None,
    ) -> None:
        super().__init__(resolve_address)
        self._push_service = push_service

    @property
    def channel_type(self) -> ChannelType:
        """Return the channel type."""
        return ChannelType.PUSH

    async def send(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
    ) -> Notification:
        notification = self.build_notification(user_id, title, message, type)

        delivered = await self._push_service.send_push(
            self.address_for(user_id), title, message
        )
        self.ensure_delivered(delivered, user_id)

        self.logger.info("Push notification %s sent to user %s", notification.id, user_id)
        return notification
