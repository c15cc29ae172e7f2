# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Base classes for notification senders.

The core prepares Notification values; a NotificationSender delivers
them through one medium (email, SMS, push, in-app) and returns the
Notification record for the delivered message. Concrete senders adapt
an external transport service to this interface, so the core never
depends on which transport is wired in.

Senders are async and run outside the core, after a domain operation
has returned.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from schoolcore.domains.exceptions import SchoolCoreError
from schoolcore.models.common import NotificationType
from schoolcore.models.notification import Notification

# Maps a user id to a transport address (email, phone number, device id).
AddressResolver = Callable[[str], str]


class ChannelType(str, Enum):
    """Available notification channel types."""

    IN_APP = "in_app"
    PUSH = "push"
    EMAIL = "email"
    SMS = "sms"


class DeliveryFailedError(SchoolCoreError):
    """Raised when a transport reports that a message was not delivered."""

    pass


class EmailService(Protocol):
    """External email transport."""

    async def send_email(self, recipient: str, subject: str, body: str) -> bool: ...


class SMSService(Protocol):
    """External SMS transport."""

    async def send_text_message(self, phone_number: str, message: str) -> bool: ...


class PushNotificationService(Protocol):
    """External push transport."""

    async def send_push(self, user_id: str, title: str, body: str) -> bool: ...


def _identity(user_id: str) -> str:
    return user_id


class NotificationSender(ABC):
    """Abstract base class for notification senders.

    Attributes:
        channel_type: The type of this channel.
    """

    def __init__(self, resolve_address: AddressResolver | None = None) -> None:
        """Initialize the sender.

        Args:
            resolve_address: Maps user ids to transport addresses.
                Defaults to using the user id itself.
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._resolve_address = resolve_address or _identity

    @property
    @abstractmethod
    def channel_type(self) -> ChannelType:
        """Return the channel type."""
        ...

    @abstractmethod
    async def send(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
    ) -> Notification:
        """Deliver a message and return its Notification record.

        Args:
            user_id: Recipient user id.
            title: Notification title.
            message: Notification body.
            type: Notification category.

        Returns:
            The Notification record for the delivered message.

        Raises:
            DeliveryFailedError: If the transport rejected the message.
        """
        ...

    def address_for(self, user_id: str) -> str:
        """Resolve the transport address of a user."""
        return self._resolve_address(user_id)

    def build_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
    ) -> Notification:
        """Create the unread Notification record for a delivered message."""
        return Notification(
            user_id=user_id,
            title=title,
            message=message,
            type=type,
        )

    def ensure_delivered(self, delivered: bool, user_id: str) -> None:
        """Raise DeliveryFailedError when the transport reported failure."""
        if not delivered:
            raise DeliveryFailedError(
                f"{self.channel_type.value} delivery to user {user_id} failed",
                details={"channel": self.channel_type.value, "user_id": user_id},
            )
