# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course controller for the course workflow.

This module provides the CourseController class for:
- Course creation and module, material and assignment authoring
- Student submissions
- Grading
- Course announcements

Every operation checks authorization and entity invariants before
mutating anything. A failed check raises UnauthorizedError,
InvariantViolationError or NotFoundError and leaves every entity
unchanged. Adding an assignment, grading and announcing each raise one
event on the course's subject; the notifications produced by observers
are returned to the caller in the OperationResult, never sent from here.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from schoolcore.core.config.settings import RuleSettings
from schoolcore.domains.constraints import (
    Constraint,
    ConstraintResult,
    can_create_course,
    can_grade,
    can_modify_course,
    can_submit,
    can_submit_as,
    check,
    describe,
    first_violation,
    grade_in_range,
    is_assignment_description_valid,
    is_assignment_title_valid,
    is_course_description_valid,
    is_course_title_valid,
    is_due_date_valid,
    is_material_type_valid,
    is_max_points_valid,
    is_ungraded,
)
from schoolcore.domains.course.catalog import CourseCatalog, InMemoryCourseCatalog
from schoolcore.domains.course.creator import (
    AssignmentCreator,
    CourseCreator,
    MaterialCreator,
    ModuleCreator,
)
from schoolcore.domains.course.experts import SubmissionExpert
from schoolcore.domains.exceptions import (
    InvariantViolationError,
    NotFoundError,
    UnauthorizedError,
)
from schoolcore.infrastructure.events import (
    AnnouncementAdded,
    CourseSubject,
    CourseSubjectRegistry,
    DeliveryReport,
    DeliveryWarning,
)
from schoolcore.models.assignment import Assignment, Grade, Submission
from schoolcore.models.common import CourseStatus, MaterialType, UserRole
from schoolcore.models.course import Course, Material, Module
from schoolcore.models.notification import Notification
from schoolcore.models.user import Actor, User
from schoolcore.utils.logging import get_audit_logger, operation_context

logger = logging.getLogger(__name__)
audit_logger = get_audit_logger()

T = TypeVar("T")

ActorLike = Actor | User


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a successful controller operation.

    Attributes:
        entity: The created or updated entity.
        notifications: Notifications produced by observers of the raised
            event, ready to hand to a NotificationDispatcher.
        warnings: Observers that failed while handling the event.
    """

    entity: T
    notifications: list[Notification] = field(default_factory=list)
    warnings: list[DeliveryWarning] = field(default_factory=list)

    @classmethod
    def from_report(cls, entity: T, report: DeliveryReport) -> OperationResult[T]:
        """Build a result carrying the outcome of an event delivery."""
        return cls(
            entity=entity,
            notifications=list(report.notifications),
            warnings=list(report.warnings),
        )


def _actor_details(actor: ActorLike, **extra: Any) -> dict[str, Any]:
    role = getattr(actor.role, "value", actor.role)
    return {"actor_id": actor.id, "role": role, **extra}


def _require(result: ConstraintResult | None, details: dict[str, Any]) -> None:
    if result is not None and not result.valid:
        raise InvariantViolationError(
            result.description,
            details={**details, "constraint": result.constraint.value},
        )


class CourseController:
    """Entry point for every course workflow operation.

    Attributes:
        catalog: Lookup of courses and assignments.
        subjects: Notification subjects by course id.
        rules: Tunable rule settings.
    """

    def __init__(
        self,
        catalog: CourseCatalog | None = None,
        subjects: CourseSubjectRegistry | None = None,
        rules: RuleSettings | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            catalog: Course lookup. Defaults to an empty in-memory catalog.
            subjects: Subject registry. Defaults to a new registry.
            rules: Rule settings. When omitted, RuleSettings() is loaded
                from the RULES_ environment variables once, here.
        """
        self.catalog = catalog if catalog is not None else InMemoryCourseCatalog()
        self.subjects = subjects if subjects is not None else CourseSubjectRegistry()
        self.rules = rules if rules is not None else RuleSettings()

        self._course_creator = CourseCreator()
        self._module_creator = ModuleCreator()
        self._material_creator = MaterialCreator()
        self._assignment_creator = AssignmentCreator()

        self._assignment_locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    # =========================================================================
    # Authoring
    # =========================================================================

    def create_course(
        self,
        actor: ActorLike,
        title: str,
        description: str,
    ) -> OperationResult[Course]:
        """Create a course owned by the actor.

        Courses created by an admin start active when
        ``rules.admin_courses_start_active`` is set; all others start
        as drafts.

        Args:
            actor: Creating user, must be a teacher or admin.
            title: Course title.
            description: Course description.

        Returns:
            Result holding the new course.

        Raises:
            UnauthorizedError: If the actor is not a teacher or admin.
            InvariantViolationError: If the title or description is invalid.
        """
        if not can_create_course(actor):
            raise UnauthorizedError(
                describe(Constraint.COURSE_CREATE),
                details=_actor_details(actor),
            )

        _require(
            first_violation(
                [
                    check(Constraint.COURSE_TITLE, is_course_title_valid(title)),
                    check(
                        Constraint.COURSE_DESCRIPTION,
                        is_course_description_valid(description),
                    ),
                ]
            ),
            _actor_details(actor),
        )

        status = CourseStatus.DRAFT
        if actor.role == UserRole.ADMIN and self.rules.admin_courses_start_active:
            status = CourseStatus.ACTIVE

        with operation_context("create_course", actor_id=actor.id):
            course = self._course_creator.create(title, description, actor.id, status)
            self.catalog.add_course(course)
            audit_logger.info(
                "course_created", course_id=course.id, status=course.status.value
            )
        return OperationResult(entity=course)

    def add_module(
        self,
        actor: ActorLike,
        course: Course,
        title: str,
        description: str,
    ) -> OperationResult[Module]:
        """Append a module to the end of a course.

        Raises:
            UnauthorizedError: If the actor is neither admin nor course teacher.
        """
        self._authorize_modify(actor, course)

        with operation_context("add_module", actor_id=actor.id, course_id=course.id):
            module = self._module_creator.create(course, title, description)
            self.catalog.add_course(course)
            audit_logger.info("module_added", module_id=module.id, order=module.order)
        return OperationResult(entity=module)

    def add_material(
        self,
        actor: ActorLike,
        course: Course,
        module_id: str,
        title: str,
        type: MaterialType | str,
        content: str,
    ) -> OperationResult[Material]:
        """Append a material to the end of a module.

        Raises:
            UnauthorizedError: If the actor is neither admin nor course teacher.
            NotFoundError: If the course has no such module.
            InvariantViolationError: If the material type is unknown.
        """
        self._authorize_modify(actor, course)
        module = self._get_module(course, module_id)

        _require(
            check(Constraint.MATERIAL_TYPE, is_material_type_valid(type)),
            _actor_details(actor, course_id=course.id, module_id=module_id),
        )

        with operation_context("add_material", actor_id=actor.id, course_id=course.id):
            material = self._material_creator.create(
                module, title, MaterialType(type), content
            )
            course.touch()
            audit_logger.info(
                "material_added", module_id=module.id, material_id=material.id
            )
        return OperationResult(entity=material)

    def add_assignment(
        self,
        actor: ActorLike,
        course: Course,
        module_id: str,
        title: str,
        description: str,
        due_date: datetime,
        max_points: float,
    ) -> OperationResult[Assignment]:
        """Add an assignment to a module and announce it to the course.

        Args:
            actor: Admin or teacher of the course.
            course: Course owning the module.
            module_id: Target module.
            title: Assignment title.
            description: Assignment description.
            due_date: Due date, must lie in the future.
            max_points: Maximum points, must be non-negative.

        Returns:
            Result holding the new assignment and the notifications
            produced for the assignment_added event.

        Raises:
            UnauthorizedError: If the actor is neither admin nor course teacher.
            NotFoundError: If the course has no such module.
            InvariantViolationError: If any assignment field is invalid.
        """
        self._authorize_modify(actor, course)
        module = self._get_module(course, module_id)

        _require(
            first_violation(
                [
                    check(Constraint.ASSIGNMENT_TITLE, is_assignment_title_valid(title)),
                    check(
                        Constraint.ASSIGNMENT_DESCRIPTION,
                        is_assignment_description_valid(description),
                    ),
                    check(Constraint.ASSIGNMENT_DUE_DATE, is_due_date_valid(due_date)),
                    check(Constraint.ASSIGNMENT_MAX_POINTS, is_max_points_valid(max_points)),
                ]
            ),
            _actor_details(actor, course_id=course.id, module_id=module_id),
        )

        with operation_context("add_assignment", actor_id=actor.id, course_id=course.id):
            assignment = self._assignment_creator.create(
                module, title, description, due_date, max_points
            )
            course.touch()
            self.catalog.add_course(course)
            audit_logger.info(
                "assignment_added", module_id=module.id, assignment_id=assignment.id
            )

        report = self.subject_for(course).add_assignment(assignment.title)
        return OperationResult.from_report(assignment, report)

    # =========================================================================
    # Submissions and grading
    # =========================================================================

    def submit_assignment(
        self,
        actor: ActorLike,
        assignment: Assignment,
        content: str,
    ) -> OperationResult[Submission]:
        """Record a student's submission.

        The submission is stored on the catalog's copy of the assignment,
        so a detached copy (for example one loaded from a payload) cannot
        bypass the one-submission-per-student rule. The duplicate check
        and the append run under the assignment's lock, so concurrent
        submissions by the same student produce exactly one Submission.

        Raises:
            UnauthorizedError: If the actor is not a student.
            NotFoundError: If the assignment is not in the catalog.
            InvariantViolationError: If the student already submitted.
        """
        details = _actor_details(actor, assignment_id=assignment.id)
        if not can_submit_as(actor):
            raise UnauthorizedError(describe(Constraint.SUBMISSION_ROLE), details=details)

        stored = self.catalog.get_assignment(assignment.id)

        with self._locked(stored.id):
            _require(
                check(Constraint.SUBMISSION_UNIQUE, can_submit(stored, actor.id)),
                details,
            )
            submission = Submission(
                student_id=actor.id,
                assignment_id=stored.id,
                content=content,
            )
            stored.submissions.append(submission)

        if assignment is not stored:
            assignment.submissions.append(submission)

        with operation_context("submit_assignment", actor_id=actor.id):
            audit_logger.info(
                "assignment_submitted",
                assignment_id=stored.id,
                submission_id=submission.id,
            )
        return OperationResult(entity=submission)

    def grade_submission(
        self,
        actor: ActorLike,
        submission: Submission,
        value: float,
        feedback: str | None = None,
    ) -> OperationResult[Grade]:
        """Grade a submission and publish the grade to the course.

        The owning assignment and course are resolved through the
        catalog. A submission can be graded only once.

        Args:
            actor: Grading user, must be a teacher or admin.
            submission: The submission to grade.
            value: Grade, between 0 and the assignment's max points.
            feedback: Optional feedback text.

        Returns:
            Result holding the new Grade and the notifications produced
            for the grade_published event.

        Raises:
            UnauthorizedError: If the actor is not a teacher or admin.
            NotFoundError: If the assignment, its course or the submission
                is unknown.
            InvariantViolationError: If the value is out of range or the
                submission was already graded.
        """
        if not can_grade(actor):
            raise UnauthorizedError(
                describe(Constraint.GRADE_ROLE),
                details=_actor_details(actor, submission_id=submission.id),
            )

        assignment = self.catalog.get_assignment(submission.assignment_id)
        course = self.catalog.course_for_assignment(assignment.id)
        details = _actor_details(
            actor,
            course_id=course.id,
            assignment_id=assignment.id,
            submission_id=submission.id,
        )

        stored = assignment.find_submission(submission.id)
        if stored is None:
            raise NotFoundError(f"Submission not found: {submission.id}", details=details)

        _require(
            check(Constraint.GRADE_RANGE, grade_in_range(value, assignment.max_points)),
            details,
        )

        with self._locked(assignment.id):
            _require(check(Constraint.GRADE_ONCE, is_ungraded(stored)), details)
            stored.grade = value
            stored.feedback = feedback

        if submission is not stored:
            submission.grade = value
            submission.feedback = feedback

        grade = Grade(
            value=value,
            feedback=feedback,
            assignment_id=assignment.id,
            student_id=stored.student_id,
            graded_by=actor.id,
        )

        with operation_context("grade_submission", actor_id=actor.id, course_id=course.id):
            audit_logger.info(
                "submission_graded",
                assignment_id=assignment.id,
                submission_id=stored.id,
                student_id=stored.student_id,
            )

        report = self.subject_for(course).publish_grade(
            stored.student_id, assignment.title, value
        )
        return OperationResult.from_report(grade, report)

    # =========================================================================
    # Announcements
    # =========================================================================

    def post_announcement(
        self,
        actor: ActorLike,
        course: Course,
        title: str,
        message: str,
    ) -> OperationResult[AnnouncementAdded]:
        """Announce a message to everyone observing the course.

        Raises:
            UnauthorizedError: If the actor is neither admin nor course teacher.
            InvariantViolationError: If the title or message is blank.
        """
        self._authorize_modify(actor, course)

        has_text = all(isinstance(t, str) and t.strip() for t in (title, message))
        _require(
            check(Constraint.ANNOUNCEMENT_TEXT, has_text),
            _actor_details(actor, course_id=course.id),
        )

        report = self.subject_for(course).add_announcement(title, message)

        with operation_context("post_announcement", actor_id=actor.id, course_id=course.id):
            audit_logger.info("announcement_posted", event_id=report.event.event_id)
        return OperationResult.from_report(report.event, report)

    def subject_for(self, course: Course) -> CourseSubject:
        """Get the notification subject of a course."""
        return self.subjects.subject_for(course.id)

    def submission_expert(self, submission: Submission) -> SubmissionExpert:
        """Build a SubmissionExpert using the configured passing percentage.

        The assignment and the stored submission are resolved through the
        catalog, so a detached copy of the submission reads the current
        grade.

        Raises:
            NotFoundError: If the submission's assignment is unknown.
        """
        assignment = self.catalog.get_assignment(submission.assignment_id)
        return SubmissionExpert(
            assignment.find_submission(submission.id) or submission,
            assignment,
            passing_percentage=self.rules.passing_percentage,
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _authorize_modify(self, actor: ActorLike, course: Course) -> None:
        if not can_modify_course(actor, course):
            logger.info(
                "Denied modification of course %s to %s %s",
                course.id,
                actor.role,
                actor.id,
            )
            raise UnauthorizedError(
                describe(Constraint.COURSE_MODIFY),
                details=_actor_details(actor, course_id=course.id),
            )

    def _get_module(self, course: Course, module_id: str) -> Module:
        module = course.find_module(module_id)
        if module is None:
            raise NotFoundError(
                f"Module not found: {module_id}",
                details={"course_id": course.id, "module_id": module_id},
            )
        return module

    @contextmanager
    def _locked(self, assignment_id: str) -> Iterator[None]:
        with self._locks_guard:
            lock = self._assignment_locks.setdefault(assignment_id, threading.Lock())
        with lock:
            yield
