# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Event infrastructure module for SchoolCore.

This module provides the synchronous per-course notification bus:

Components:
- CourseSubject: Observer registry and in-call event delivery
- CourseSubjectRegistry: One subject per course id
- Course events: AssignmentAdded, GradePublished, AnnouncementAdded
- StudentNotificationObserver: Per-student notification projection

Architecture:
    Controller → CourseSubject.notify() → Observer.update() → Notification

Quick Start:
    from schoolcore.infrastructure.events import (
        CourseSubjectRegistry,
        StudentNotificationObserver,
    )

    subjects = CourseSubjectRegistry()
    subject = subjects.subject_for(course.id)
    subject.register(StudentNotificationObserver(student))

    report = subject.add_announcement("Exam moved", "The exam is on Friday.")
"""

from schoolcore.infrastructure.events.observers import StudentNotificationObserver
from schoolcore.infrastructure.events.subject import (
    CourseSubject,
    CourseSubjectRegistry,
    DeliveryReport,
    DeliveryWarning,
    Observer,
)
from schoolcore.infrastructure.events.types import (
    AnnouncementAdded,
    AssignmentAdded,
    CourseEvent,
    CourseEventType,
    GradePublished,
)

__all__ = [
    # Subject
    "CourseSubject",
    "CourseSubjectRegistry",
    "DeliveryReport",
    "DeliveryWarning",
    "Observer",
    # Event Types
    "CourseEvent",
    "CourseEventType",
    "AssignmentAdded",
    "GradePublished",
    "AnnouncementAdded",
    # Observers
    "StudentNotificationObserver",
]
