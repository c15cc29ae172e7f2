# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Notification senders for delivering notifications.

This package provides NotificationSender implementations, each adapting
an external transport service:

- EmailNotificationAdapter: Sends through an EmailService (SmtpEmailService bundled)
- SMSNotificationAdapter: Sends through an SMSService
- PushNotificationAdapter: Sends through a PushNotificationService
- InAppNotificationSender: Keeps records for the in-app notification center

Usage:
    from schoolcore.infrastructure.notifications.channels import (
        EmailNotificationAdapter,
        SmtpEmailService,
    )

    sender = EmailNotificationAdapter(
        SmtpEmailService(settings.smtp),
        resolve_address=directory.email_for,
    )
    notification = await sender.send(
        user_id, "Grade Posted", "Your grade has been posted.", NotificationType.GRADE
    )
"""

from schoolcore.infrastructure.notifications.channels.base import (
    AddressResolver,
    ChannelType,
    DeliveryFailedError,
    EmailService,
    NotificationSender,
    PushNotificationService,
    SMSService,
)
from schoolcore.infrastructure.notifications.channels.email import (
    EmailNotificationAdapter,
    SmtpEmailService,
)
from schoolcore.infrastructure.notifications.channels.in_app import InAppNotificationSender
from schoolcore.infrastructure.notifications.channels.push import PushNotificationAdapter
from schoolcore.infrastructure.notifications.channels.sms import SMSNotificationAdapter

__all__ = [
    # Base types
    "AddressResolver",
    "ChannelType",
    "DeliveryFailedError",
    "NotificationSender",
    # Transport protocols
    "EmailService",
    "PushNotificationService",
    "SMSService",
    # Senders
    "EmailNotificationAdapter",
    "InAppNotificationSender",
    "PushNotificationAdapter",
    "SMSNotificationAdapter",
    "SmtpEmailService",
]
