# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Notification delivery for SchoolCore.

Domain operations return prepared Notification values; this package
delivers them through pluggable channels:
- Email (SMTP via aiosmtplib, or any EmailService)
- SMS (any SMSService)
- Push (any PushNotificationService)
- In-app records

Usage:
    from schoolcore.infrastructure.notifications import (
        InAppNotificationSender,
        NotificationDispatcher,
    )

    dispatcher = NotificationDispatcher(InAppNotificationSender())
    result = await dispatcher.dispatch(operation.notifications)
"""

from schoolcore.infrastructure.notifications.channels import (
    AddressResolver,
    ChannelType,
    DeliveryFailedError,
    EmailNotificationAdapter,
    EmailService,
    InAppNotificationSender,
    NotificationSender,
    PushNotificationAdapter,
    PushNotificationService,
    SMSNotificationAdapter,
    SMSService,
    SmtpEmailService,
)
from schoolcore.infrastructure.notifications.presentation import (
    PRESENTATIONS,
    NotificationPresentation,
    presentation_for,
)
from schoolcore.infrastructure.notifications.service import (
    DispatchResult,
    NotificationDispatcher,
)

__all__ = [
    # Dispatcher
    "DispatchResult",
    "NotificationDispatcher",
    # Presentation
    "PRESENTATIONS",
    "NotificationPresentation",
    "presentation_for",
    # Channel types
    "AddressResolver",
    "ChannelType",
    "DeliveryFailedError",
    "NotificationSender",
    "EmailService",
    "PushNotificationService",
    "SMSService",
    # Channels
    "EmailNotificationAdapter",
    "InAppNotificationSender",
    "PushNotificationAdapter",
    "SMSNotificationAdapter",
    "SmtpEmailService",
]
