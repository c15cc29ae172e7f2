# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment and calendar event records.

Neither has behaviour in the core; they are referenced by constraints
and carried for payload compatibility.
"""

from datetime import datetime

from pydantic import Field

from schoolcore.models.common import EnrollmentStatus, EntityModel, new_id
from schoolcore.utils.datetime import utc_now


class Enrollment(EntityModel):
    """A student's enrollment in a course."""

    id: str = Field(default_factory=new_id)
    student_id: str
    course_id: str
    enrolled_at: datetime = Field(default_factory=utc_now)
    status: EnrollmentStatus = EnrollmentStatus.ACTIVE
    progress: float = 0


class Event(EntityModel):
    """A calendar entry."""

    id: str = Field(default_factory=new_id)
    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime
    location: str | None = None
    course_id: str | None = None
    users: list[str] = Field(default_factory=list)
    date: datetime
    attendees: int | None = None
