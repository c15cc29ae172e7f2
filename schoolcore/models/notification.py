# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Notification record produced by observers and senders."""

from datetime import datetime

from pydantic import Field

from schoolcore.models.common import EntityModel, NotificationType, new_id
from schoolcore.utils.datetime import utc_now


class Notification(EntityModel):
    """A message addressed to one user."""

    id: str = Field(default_factory=new_id)
    user_id: str
    title: str
    message: str
    type: NotificationType
    is_read: bool = False
    created_at: datetime = Field(default_factory=utc_now)
