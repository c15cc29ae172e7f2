# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Entity invariants as pure predicates.

Each predicate evaluates one invariant and returns a bool. Predicates
never raise: malformed input (wrong type, negative max points, a missing
submissions list) evaluates to False. Descriptions of every invariant are
available through describe(), and check() pairs a predicate outcome with
its description for callers that need to report the failure.

Example:
    >>> grade_in_range(20, 20)
    True
    >>> check(Constraint.GRADE_RANGE, grade_in_range(21, 20)).description
    'A grade must be between 0 and the maximum points for the assignment.'
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from schoolcore.models.common import CourseStatus, MaterialType, UserRole
from schoolcore.utils.datetime import is_in_future

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Exclusive bounds shared by course and assignment text fields.
TITLE_LENGTH_BOUNDS = (3, 100)
DESCRIPTION_LENGTH_BOUNDS = (10, 500)
PROGRESS_BOUNDS = (0, 100)


class Constraint(str, Enum):
    """Identifiers of every invariant the validator knows."""

    USER_ROLE = "user.role"
    USER_EMAIL = "user.email"
    COURSE_STATUS = "course.status"
    COURSE_TITLE = "course.title"
    COURSE_DESCRIPTION = "course.description"
    COURSE_CREATE = "course.create"
    COURSE_ACCESS = "course.access"
    COURSE_MODIFY = "course.modify"
    MODULE_ORDER = "module.order"
    MATERIAL_TYPE = "material.type"
    MATERIAL_ORDER = "material.order"
    ASSIGNMENT_TITLE = "assignment.title"
    ASSIGNMENT_DESCRIPTION = "assignment.description"
    ASSIGNMENT_DUE_DATE = "assignment.due_date"
    ASSIGNMENT_MAX_POINTS = "assignment.max_points"
    SUBMISSION_ROLE = "submission.role"
    SUBMISSION_UNIQUE = "submission.unique"
    GRADE_ROLE = "grade.role"
    GRADE_RANGE = "grade.range"
    GRADE_ONCE = "grade.once"
    ANNOUNCEMENT_TEXT = "announcement.text"
    ENROLLMENT_PROGRESS = "enrollment.progress"


_DESCRIPTIONS: dict[Constraint, str] = {
    Constraint.USER_ROLE: "User role must be one of: STUDENT, TEACHER, ADMIN.",
    Constraint.USER_EMAIL: "Email must be a valid email address.",
    Constraint.COURSE_STATUS: "Course status must be one of: DRAFT, ACTIVE, ARCHIVED.",
    Constraint.COURSE_TITLE: "Course title must be between 3 and 100 characters.",
    Constraint.COURSE_DESCRIPTION: "Course description must be between 10 and 500 characters.",
    Constraint.COURSE_CREATE: "Only teachers and administrators can create courses.",
    Constraint.COURSE_ACCESS: "User must be an admin or the teacher of the course to access it.",
    Constraint.COURSE_MODIFY: "User must be an admin or the teacher of the course to modify it.",
    Constraint.MODULE_ORDER: "Module order must be unique within the course.",
    Constraint.MATERIAL_TYPE: "Material type must be one of: TEXT, VIDEO, PDF, LINK.",
    Constraint.MATERIAL_ORDER: "Material order must be unique within the module.",
    Constraint.ASSIGNMENT_TITLE: "Assignment title must be between 3 and 100 characters.",
    Constraint.ASSIGNMENT_DESCRIPTION: "Assignment description must be between 10 and 500 characters.",
    Constraint.ASSIGNMENT_DUE_DATE: "Due date must be in the future.",
    Constraint.ASSIGNMENT_MAX_POINTS: "Maximum points must be a non-negative number.",
    Constraint.SUBMISSION_ROLE: "Only students can submit assignments.",
    Constraint.SUBMISSION_UNIQUE: "A student can only submit once for each assignment.",
    Constraint.GRADE_ROLE: "Only teachers and administrators can grade submissions.",
    Constraint.GRADE_RANGE: "A grade must be between 0 and the maximum points for the assignment.",
    Constraint.GRADE_ONCE: "A submission can only be graded once.",
    Constraint.ANNOUNCEMENT_TEXT: "Announcement title and message must not be empty.",
    Constraint.ENROLLMENT_PROGRESS: "Enrollment progress must be between 0 and 100.",
}

_FORMAL_OCL: dict[str, str] = {
    "User": """
context User
inv validRole: role = UserRole::STUDENT or role = UserRole::TEACHER or role = UserRole::ADMIN
inv validEmail: email.matches('^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\\.[a-zA-Z]{2,}$')
""",
    "Course": """
context Course
inv validStatus: status = CourseStatus::DRAFT or status = CourseStatus::ACTIVE or status = CourseStatus::ARCHIVED
inv validTitle: title.size() > 3 and title.size() < 100
inv validDescription: description.size() > 10 and description.size() < 500
""",
    "Assignment": """
context Assignment
inv validDueDate: dueDate > Date.now()
inv validTitle: title.size() > 3 and title.size() < 100
inv validDescription: description.size() > 10 and description.size() < 500
""",
    "Submission": """
context Submission
inv uniqueSubmissionPerStudent:
  self.assignment.submissions->select(s | s.studentId = self.studentId)->size() = 1
""",
    "Grade": """
context Grade
inv validGradeRange:
  self.value >= 0 and self.value <= self.assignment.maxPoints
""",
    "Role": """
context User
inv canAccessCourse: role = UserRole::ADMIN or self.courses->includes(course)
inv canModifyCourse: role = UserRole::ADMIN or self = course.teacher
""",
    "Enrollment": """
context Enrollment
inv validProgress: progress >= 0 and progress <= 100
""",
}


@dataclass(frozen=True)
class ConstraintResult:
    """Outcome of evaluating one invariant.

    Attributes:
        constraint: Which invariant was evaluated.
        valid: Whether it holds.
    """

    constraint: Constraint
    valid: bool

    @property
    def description(self) -> str:
        """Human-readable description of the invariant."""
        return describe(self.constraint)


def describe(constraint: Constraint) -> str:
    """Get the human-readable description of an invariant."""
    return _DESCRIPTIONS[constraint]


def formal_ocl(context: str) -> str:
    """Get the formal OCL text for an entity context.

    Args:
        context: Entity name, e.g. "Course" or "Grade".

    Returns:
        OCL invariant block, or an empty string for unknown contexts.
    """
    return _FORMAL_OCL.get(context, "").strip()


def check(constraint: Constraint, valid: bool) -> ConstraintResult:
    """Pair a predicate outcome with its constraint."""
    return ConstraintResult(constraint=constraint, valid=bool(valid))


def first_violation(results: Iterable[ConstraintResult]) -> ConstraintResult | None:
    """Return the first failing result, or None when all hold."""
    return next((r for r in results if not r.valid), None)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _length_within(text: Any, bounds: tuple[int, int]) -> bool:
    if not isinstance(text, str):
        return False
    low, high = bounds
    return low < len(text) < high


def _role_of(user: Any) -> UserRole | None:
    role = getattr(user, "role", None)
    try:
        return UserRole(role)
    except (ValueError, TypeError):
        return None


# =============================================================================
# User
# =============================================================================


def is_valid_role(role: Any) -> bool:
    """Role is one of student, teacher, admin."""
    try:
        UserRole(role)
    except (ValueError, TypeError):
        return False
    return True


def is_email_valid(email: Any) -> bool:
    """Email matches the RFC-lite address pattern."""
    return isinstance(email, str) and EMAIL_PATTERN.fullmatch(email) is not None


# =============================================================================
# Course
# =============================================================================


def is_valid_course_status(status: Any) -> bool:
    """Status is one of draft, active, archived."""
    try:
        CourseStatus(status)
    except (ValueError, TypeError):
        return False
    return True


def is_course_title_valid(title: Any) -> bool:
    """3 < len(title) < 100."""
    return _length_within(title, TITLE_LENGTH_BOUNDS)


def is_course_description_valid(description: Any) -> bool:
    """10 < len(description) < 500."""
    return _length_within(description, DESCRIPTION_LENGTH_BOUNDS)


def has_unique_order(siblings: Iterable[Any]) -> bool:
    """No two siblings share the same order value."""
    try:
        orders = [s.order for s in siblings]
    except (AttributeError, TypeError):
        return False
    return len(orders) == len(set(orders))


def is_material_type_valid(material_type: Any) -> bool:
    """Material type is one of text, video, pdf, link."""
    try:
        MaterialType(material_type)
    except (ValueError, TypeError):
        return False
    return True


# =============================================================================
# Assignment
# =============================================================================


def is_assignment_title_valid(title: Any) -> bool:
    """3 < len(title) < 100."""
    return _length_within(title, TITLE_LENGTH_BOUNDS)


def is_assignment_description_valid(description: Any) -> bool:
    """10 < len(description) < 500."""
    return _length_within(description, DESCRIPTION_LENGTH_BOUNDS)


def is_due_date_valid(due_date: Any, now: datetime | None = None) -> bool:
    """Due date lies strictly in the future relative to now."""
    if not isinstance(due_date, datetime):
        return False
    return is_in_future(due_date, now)


def is_max_points_valid(max_points: Any) -> bool:
    """Max points is a finite, non-negative number."""
    return _is_number(max_points) and max_points >= 0


# =============================================================================
# Submission and grade
# =============================================================================


def can_submit(assignment: Any, student_id: str) -> bool:
    """True iff no existing submission on the assignment has this student id.

    Callers that append afterwards must hold the assignment's lock across
    the check and the append.
    """
    submissions = getattr(assignment, "submissions", None)
    if submissions is None:
        return False
    return not any(s.student_id == student_id for s in submissions)


def grade_in_range(value: Any, max_points: Any) -> bool:
    """0 <= value <= max_points, inclusive at both ends.

    A max_points of 0 admits only a value of 0; negative max_points
    admits nothing.
    """
    if not (_is_number(value) and _is_number(max_points)):
        return False
    if max_points < 0:
        return False
    return 0 <= value <= max_points


def is_ungraded(submission: Any) -> bool:
    """The submission has not been graded yet."""
    return getattr(submission, "grade", None) is None


# =============================================================================
# Roles
# =============================================================================


def can_create_course(user: Any) -> bool:
    """Teachers and admins can create courses."""
    return _role_of(user) in (UserRole.TEACHER, UserRole.ADMIN)


def can_access_course(user: Any, course: Any) -> bool:
    """Admins, and the teacher of the course, can access it."""
    if _role_of(user) is UserRole.ADMIN:
        return True
    return getattr(course, "teacher_id", None) == getattr(user, "id", object())


def can_modify_course(user: Any, course: Any) -> bool:
    """Admins, and the teacher of the course, can modify it."""
    if _role_of(user) is UserRole.ADMIN:
        return True
    return getattr(course, "teacher_id", None) == getattr(user, "id", object())


def can_submit_as(user: Any) -> bool:
    """Only students submit work."""
    return _role_of(user) is UserRole.STUDENT


def can_grade(user: Any) -> bool:
    """Teachers and admins can grade."""
    return _role_of(user) in (UserRole.TEACHER, UserRole.ADMIN)


# =============================================================================
# Enrollment
# =============================================================================


def is_progress_valid(progress: Any) -> bool:
    """0 <= progress <= 100."""
    low, high = PROGRESS_BOUNDS
    return _is_number(progress) and low <= progress <= high
