# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Per-type presentation of notifications.

Each notification type has a message label, a target URL in the UI and a
delivery priority (1 is most urgent). Senders use the label and URL to
build message bodies; the dispatcher uses the priority to order sends.
"""

from dataclasses import dataclass

from schoolcore.models.common import NotificationType
from schoolcore.models.notification import Notification


@dataclass(frozen=True)
class NotificationPresentation:
    """How one notification type is shown to its recipient."""

    label: str
    action_url: str
    priority: int

    def format_message(self, notification: Notification) -> str:
        """Render the labelled title and message as plain text."""
        return f"{self.label}: {notification.title}\n{notification.message}"


PRESENTATIONS: dict[NotificationType, NotificationPresentation] = {
    NotificationType.GRADE: NotificationPresentation(
        label="Grade Update",
        action_url="/grades/view",
        priority=1,
    ),
    NotificationType.ASSIGNMENT: NotificationPresentation(
        label="Assignment Notification",
        action_url="/assignments/view",
        priority=2,
    ),
    NotificationType.ANNOUNCEMENT: NotificationPresentation(
        label="Announcement",
        action_url="/announcements/view",
        priority=2,
    ),
    NotificationType.SYSTEM: NotificationPresentation(
        label="System Notification",
        action_url="/dashboard",
        priority=3,
    ),
}


def presentation_for(notification_type: NotificationType) -> NotificationPresentation:
    """Get the presentation of a notification type."""
    return PRESENTATIONS[NotificationType(notification_type)]
