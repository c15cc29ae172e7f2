# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SMS notification sender."""

from schoolcore.infrastructure.notifications.channels.base import (
    AddressResolver,
    ChannelType,
    NotificationSender,
    SMSService,
)
from schoolcore.models.common import NotificationType
from schoolcore.models.notification import Notification


class SMSNotificationAdapter(NotificationSender):
    """Sends notifications as ``"<title>: <message>"`` text messages."""

    def __init__(
        self,
        sms_service: SMSService,
        resolve_address: AddressResolver | None = None,
    ) -> None:
        super().__init__(resolve_address)
        self._sms_service = sms_service

    @property
    def channel_type(self) -> ChannelType:
        """Return the channel type."""
        return ChannelType.SMS

    async def send(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
    ) -> Notification:
        notification = self.build_notification(user_id, title, message, type)

        delivered = await self._sms_service.send_text_message(
            self.address_for(user_id), f"{title}: {message}"
        )
        self.ensure_delivered(delivered, user_id)

        self.logger.info("SMS notification %s sent to user %s", notification.id, user_id)
        return notification
