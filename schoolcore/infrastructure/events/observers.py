# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Concrete course observers."""

from typing import assert_never

from schoolcore.infrastructure.events.types import (
    AnnouncementAdded,
    AssignmentAdded,
    CourseEvent,
    GradePublished,
)
from schoolcore.models.common import NotificationType
from schoolcore.models.notification import Notification
from schoolcore.models.user import Actor, User


class StudentNotificationObserver:
    """Turns course events into notifications for one student.

    Assignment and announcement events always produce a notification for
    the bound student. Grade events produce one only when they concern
    that student.
    """

    def __init__(self, student: User | Actor) -> None:
        self.student = student

    def __repr__(self) -> str:
        return f"StudentNotificationObserver(student_id={self.student.id!r})"

    def update(self, event: CourseEvent) -> Notification | None:
        match event:
            case AssignmentAdded(assignment_title=title):
                return Notification(
                    user_id=self.student.id,
                    title="New Assignment",
                    message=f'A new assignment "{title}" has been added to your course.',
                    type=NotificationType.ASSIGNMENT,
                )
            case GradePublished(student_id=student_id, assignment_title=title):
                if student_id != self.student.id:
                    return None
                return Notification(
                    user_id=self.student.id,
                    title="Grade Posted",
                    message=f'Your grade for "{title}" has been posted.',
                    type=NotificationType.GRADE,
                )
            case AnnouncementAdded(title=title, message=message):
                return Notification(
                    user_id=self.student.id,
                    title=title,
                    message=message,
                    type=NotificationType.ANNOUNCEMENT,
                )
            case _:
                assert_never(event)
