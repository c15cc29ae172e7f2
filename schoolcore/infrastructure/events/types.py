# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course domain event definitions.

Events form a closed set. Each variant is a frozen dataclass tagged with
its CourseEventType so observers can dispatch with ``match``:

    match event:
        case GradePublished(student_id=sid):
            ...
        case AssignmentAdded() | AnnouncementAdded():
            ...

Adding a new event:
1. Add a member to CourseEventType
2. Add a frozen dataclass with ``kind`` fixed to that member
3. Extend the CourseEvent union and every observer's match
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from schoolcore.utils.datetime import utc_now


class CourseEventType(str, Enum):
    """All course event kinds."""

    ASSIGNMENT_ADDED = "assignment_added"
    GRADE_PUBLISHED = "grade_published"
    ANNOUNCEMENT_ADDED = "announcement_added"


@dataclass(frozen=True, kw_only=True)
class _EventBase:
    course_id: str
    event_id: str = field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = field(default_factory=utc_now)

    def details(self) -> dict[str, Any]:
        """Event-specific payload fields."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to the {type, courseId, details} wire shape."""
        return {
            "eventId": self.event_id,
            "type": self.kind.value,
            "courseId": self.course_id,
            "occurredAt": self.occurred_at.isoformat(),
            "details": self.details(),
        }


@dataclass(frozen=True, kw_only=True)
class AssignmentAdded(_EventBase):
    """A new assignment was added to the course."""

    assignment_title: str
    kind: CourseEventType = field(default=CourseEventType.ASSIGNMENT_ADDED, init=False)

    def details(self) -> dict[str, Any]:
        return {"assignmentTitle": self.assignment_title}


@dataclass(frozen=True, kw_only=True)
class GradePublished(_EventBase):
    """A grade was posted for one student."""

    student_id: str
    assignment_title: str
    grade: float
    kind: CourseEventType = field(default=CourseEventType.GRADE_PUBLISHED, init=False)

    def details(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "assignmentTitle": self.assignment_title,
            "grade": self.grade,
        }


@dataclass(frozen=True, kw_only=True)
class AnnouncementAdded(_EventBase):
    """An announcement was posted to the course."""

    title: str
    message: str
    kind: CourseEventType = field(default=CourseEventType.ANNOUNCEMENT_ADDED, init=False)

    def details(self) -> dict[str, Any]:
        return {"title": self.title, "message": self.message}


CourseEvent = AssignmentAdded | GradePublished | AnnouncementAdded
