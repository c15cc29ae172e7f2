# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Email notification sender and SMTP transport.

EmailNotificationAdapter adapts any EmailService to the
NotificationSender interface. SmtpEmailService is the bundled
EmailService, sending multipart (plain text + HTML) mail with aiosmtplib.

Configuration (via environment variables, see SMTPSettings):
- SMTP_HOST: SMTP server hostname
- SMTP_PORT: SMTP server port (default: 587)
- SMTP_USERNAME: SMTP authentication username
- SMTP_PASSWORD: SMTP authentication password
- SMTP_USE_TLS: Use STARTTLS (default: true)
- SMTP_FROM_EMAIL: Sender email address
- SMTP_FROM_NAME: Sender display name
"""

import html
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib

from schoolcore.core.config.settings import Settings, SMTPSettings
from schoolcore.infrastructure.notifications.channels.base import (
    AddressResolver,
    ChannelType,
    EmailService,
    NotificationSender,
)
from schoolcore.infrastructure.notifications.presentation import presentation_for
from schoolcore.models.common import NotificationType
from schoolcore.models.notification import Notification

logger = logging.getLogger(__name__)

FOOTER = "This notification was sent by SchoolCore."


class SmtpEmailService:
    """EmailService implementation over async SMTP."""

    def __init__(self, settings: SMTPSettings) -> None:
        """Initialize the SMTP service.

        Args:
            settings: SMTP connection settings.
        """
        self._settings = settings

    async def send_email(self, recipient: str, subject: str, body: str) -> bool:
        """Send an email.

        Args:
            recipient: Recipient email address.
            subject: Subject line.
            body: Plain text body.

        Returns:
            True if the SMTP server accepted the message.
        """
        if not self._settings.is_configured:
            logger.warning(
                "Email not sent: SMTP_HOST, SMTP_USERNAME, SMTP_PASSWORD, "
                "or SMTP_FROM_EMAIL not set"
            )
            return False

        message = self.build_message(recipient, subject, body)

        try:
            await aiosmtplib.send(
                message,
                hostname=self._settings.host,
                port=self._settings.port,
                username=self._settings.username,
                password=self._settings.password.get_secret_value(),
                start_tls=self._settings.use_tls,
                timeout=self._settings.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(
                "Failed to send email to %s: %s",
                recipient,
                str(e),
                exc_info=True,
            )
            return False

        logger.info("Email sent to %s: %s", recipient, subject)
        return True

    def build_message(self, recipient: str, subject: str, body: str) -> MIMEMultipart:
        """Build the MIME message with plain text and HTML parts.

        Args:
            recipient: Recipient email address.
            subject: Subject line.
            body: Plain text body.

        Returns:
            MIMEMultipart message ready to send.
        """
        message = MIMEMultipart("alternative")
        message["From"] = self._settings.sender
        message["To"] = recipient
        message["Subject"] = subject

        text_content = f"{body}\n\n---\n{FOOTER}"
        message.attach(MIMEText(text_content, "plain", "utf-8"))
        message.attach(MIMEText(self._build_html(subject, body), "html", "utf-8"))

        return message

    def _build_html(self, subject: str, body: str) -> str:
        title = html.escape(subject)
        content = html.escape(body).replace("\n", "<br>")
        return f"""
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #1F2937;">
    <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="color: #4F46E5; font-size: 22px;">{title}</h1>
        <p>{content}</p>
        <p style="font-size: 12px; color: #9CA3AF;">{html.escape(FOOTER)}</p>
    </div>
</body>
</html>
        """.strip()


class EmailNotificationAdapter(NotificationSender):
    """Sends notifications through an EmailService."""

    def __init__(
        self,
        email_service: EmailService,
        resolve_address: AddressResolver | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            email_service: Transport used to send mail.
            resolve_address: Maps user ids to email addresses.
        """
        super().__init__(resolve_address)
        self._email_service = email_service

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        resolve_address: AddressResolver | None = None,
    ) -> "EmailNotificationAdapter":
        """Build an adapter over SMTP using application settings."""
        return cls(SmtpEmailService(settings.smtp), resolve_address)

    @property
    def channel_type(self) -> ChannelType:
        """Return the channel type."""
        return ChannelType.EMAIL

    async def send(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
    ) -> Notification:
        """Email the message to the user's resolved address."""
        notification = self.build_notification(user_id, title, message, type)
        presentation = presentation_for(type)
        body = (
            f"{presentation.format_message(notification)}\n\n"
            f"View Details: {presentation.action_url}"
        )

        delivered = await self._email_service.send_email(
            self.address_for(user_id), title, body
        )
        self.ensure_delivered(delivered, user_id)

        self.logger.info("Email notification %s sent to user %s", notification.id, user_id)
        return notification
