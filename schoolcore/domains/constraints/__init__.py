# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Constraint validator package.

Stateless predicates over entities, one per invariant, with
human-readable descriptions and formal OCL text.
"""

from schoolcore.domains.constraints.validator import (
    Constraint,
    ConstraintResult,
    can_access_course,
    can_create_course,
    can_grade,
    can_modify_course,
    can_submit,
    can_submit_as,
    check,
    describe,
    first_violation,
    formal_ocl,
    grade_in_range,
    has_unique_order,
    is_assignment_description_valid,
    is_assignment_title_valid,
    is_course_description_valid,
    is_course_title_valid,
    is_due_date_valid,
    is_email_valid,
    is_material_type_valid,
    is_max_points_valid,
    is_progress_valid,
    is_ungraded,
    is_valid_course_status,
    is_valid_role,
)

__all__ = [
    # Results
    "Constraint",
    "ConstraintResult",
    "check",
    "describe",
    "first_violation",
    "formal_ocl",
    # User
    "is_valid_role",
    "is_email_valid",
    # Course
    "is_valid_course_status",
    "is_course_title_valid",
    "is_course_description_valid",
    "has_unique_order",
    "is_material_type_valid",
    # Assignment
    "is_assignment_title_valid",
    "is_assignment_description_valid",
    "is_due_date_valid",
    "is_max_points_valid",
    # Submission and grade
    "can_submit",
    "grade_in_range",
    "is_ungraded",
    # Roles
    "can_create_course",
    "can_access_course",
    "can_modify_course",
    "can_submit_as",
    "can_grade",
    # Enrollment
    "is_progress_valid",
]
