# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Synchronous per-course notification subject.

Each course has one CourseSubject holding an ordered registry of
observers. notify() delivers an event to every registered observer, in
registration order, within the calling thread, and collects the
Notification records the observers return.

The subject supports:
- Idempotent registration (by identity)
- Per-observer failure isolation: a raising observer is logged and
  reported as a DeliveryWarning, the remaining observers still run
- Concurrent register/unregister during delivery: notify() iterates an
  immutable snapshot taken under the registry lock

Example:
    subject = CourseSubject(course.id)
    subject.register(StudentNotificationObserver(student))

    report = subject.publish_grade(student.id, "Essay 1", 15)
    for notification in report.notifications:
        ...
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from schoolcore.infrastructure.events.types import (
    AnnouncementAdded,
    AssignmentAdded,
    CourseEvent,
    GradePublished,
)
from schoolcore.models.notification import Notification

logger = logging.getLogger(__name__)


@runtime_checkable
class Observer(Protocol):
    """Receiver of course events.

    update() returns the Notification produced for the event, or None
    when the event is not relevant to this observer.
    """

    def update(self, event: CourseEvent) -> Notification | None: ...


@dataclass(frozen=True)
class DeliveryWarning:
    """Non-fatal failure of one observer during delivery.

    Attributes:
        observer: Description of the failing observer.
        event_id: Event being delivered.
        error_message: Error raised by the observer.
    """

    observer: str
    event_id: str
    error_message: str


@dataclass
class DeliveryReport:
    """Result of delivering one event.

    Attributes:
        event: The delivered event.
        delivered_count: Observers that handled the event without error.
        notifications: Notification records produced by observers.
        warnings: Observers that failed.
    """

    event: CourseEvent
    delivered_count: int = 0
    notifications: list[Notification] = field(default_factory=list)
    warnings: list[DeliveryWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Check whether any observer failed."""
        return bool(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "event": self.event.to_dict(),
            "deliveredCount": self.delivered_count,
            "notifications": [n.to_payload() for n in self.notifications],
            "warnings": [
                {
                    "observer": w.observer,
                    "eventId": w.event_id,
                    "errorMessage": w.error_message,
                }
                for w in self.warnings
            ],
        }


class CourseSubject:
    """Observer registry and synchronous event delivery for one course.

    Attributes:
        course_id: The course this subject publishes for.
    """

    def __init__(self, course_id: str) -> None:
        """Initialize an empty subject.

        Args:
            course_id: Identifier of the owning course.
        """
        self.course_id = course_id
        self._observers: list[Observer] = []
        self._lock = threading.Lock()
        self._event_count = 0

    def register(self, observer: Observer) -> None:
        """Register an observer. Registering the same instance twice is a no-op."""
        with self._lock:
            if any(existing is observer for existing in self._observers):
                return
            self._observers.append(observer)
        logger.debug("Registered observer %r on course %s", observer, self.course_id)

    def unregister(self, observer: Observer) -> None:
        """Remove an observer. No-op if it is not registered."""
        with self._lock:
            self._observers = [o for o in self._observers if o is not observer]

    @property
    def observers(self) -> tuple[Observer, ...]:
        """Snapshot of currently registered observers, in registration order."""
        with self._lock:
            return tuple(self._observers)

    def notify(self, event: CourseEvent) -> DeliveryReport:
        """Deliver an event to every registered observer.

        Observers run synchronously in registration order. An observer
        that raises is logged and recorded as a warning; delivery to the
        remaining observers continues.

        Args:
            event: The event to deliver.

        Returns:
            DeliveryReport with produced notifications and warnings.
        """
        with self._lock:
            snapshot = tuple(self._observers)
            self._event_count += 1

        report = DeliveryReport(event=event)

        if not snapshot:
            logger.debug(
                "No observers for event %s (course: %s)",
                event.kind.value,
                self.course_id,
            )
            return report

        logger.debug(
            "Delivering event %s to %d observers (course: %s)",
            event.kind.value,
            len(snapshot),
            self.course_id,
        )

        for observer in snapshot:
            try:
                notification = observer.update(event)
            except Exception as e:
                logger.warning(
                    "Observer %r failed for event %s: %s",
                    observer,
                    event.kind.value,
                    str(e),
                    exc_info=True,
                )
                report.warnings.append(
                    DeliveryWarning(
                        observer=repr(observer),
                        event_id=event.event_id,
                        error_message=str(e),
                    )
                )
                continue

            report.delivered_count += 1
            if notification is not None:
                report.notifications.append(notification)

        return report

    def add_assignment(self, assignment_title: str) -> DeliveryReport:
        """Raise an assignment_added event."""
        return self.notify(
            AssignmentAdded(course_id=self.course_id, assignment_title=assignment_title)
        )

    def publish_grade(
        self,
        student_id: str,
        assignment_title: str,
        grade: float,
    ) -> DeliveryReport:
        """Raise a grade_published event for one student."""
        return self.notify(
            GradePublished(
                course_id=self.course_id,
                student_id=student_id,
                assignment_title=assignment_title,
                grade=grade,
            )
        )

    def add_announcement(self, title: str, message: str) -> DeliveryReport:
        """Raise an announcement_added event."""
        return self.notify(
            AnnouncementAdded(course_id=self.course_id, title=title, message=message)
        )

    def clear(self) -> None:
        """Remove all observers."""
        with self._lock:
            self._observers.clear()

    def get_stats(self) -> dict[str, Any]:
        """Get subject statistics.

        Returns:
            Dictionary with observer and event counts.
        """
        with self._lock:
            return {
                "course_id": self.course_id,
                "observers": len(self._observers),
                "events_published": self._event_count,
            }


class CourseSubjectRegistry:
    """Holds one CourseSubject per course id.

    Injected into the controller so hosts and tests control subject
    lifetime explicitly.
    """

    def __init__(self) -> None:
        self._subjects: dict[str, CourseSubject] = {}
        self._lock = threading.Lock()

    def subject_for(self, course_id: str) -> CourseSubject:
        """Get the subject for a course, creating it on first use."""
        with self._lock:
            subject = self._subjects.get(course_id)
            if subject is None:
                subject = CourseSubject(course_id)
                self._subjects[course_id] = subject
            return subject

    def discard(self, course_id: str) -> None:
        """Drop the subject of a course, if any."""
        with self._lock:
            self._subjects.pop(course_id, None)

    def __contains__(self, course_id: object) -> bool:
        with self._lock:
            return course_id in self._subjects
