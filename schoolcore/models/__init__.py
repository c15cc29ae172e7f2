# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Entity records for SchoolCore.

Plain pydantic models with no domain behaviour. Rules live in
schoolcore.domains.constraints, mutations in schoolcore.domains.course.
"""

from schoolcore.models.assignment import Assignment, Grade, Submission
from schoolcore.models.common import (
    CourseStatus,
    EnrollmentStatus,
    EntityModel,
    MaterialType,
    NotificationType,
    UserRole,
    new_id,
)
from schoolcore.models.course import Course, Material, Module
from schoolcore.models.enrollment import Enrollment, Event
from schoolcore.models.notification import Notification
from schoolcore.models.user import Actor, User

__all__ = [
    # Base
    "EntityModel",
    "new_id",
    # Enums
    "UserRole",
    "CourseStatus",
    "MaterialType",
    "NotificationType",
    "EnrollmentStatus",
    # Entities
    "Actor",
    "User",
    "Course",
    "Module",
    "Material",
    "Assignment",
    "Submission",
    "Grade",
    "Notification",
    "Enrollment",
    "Event",
]
