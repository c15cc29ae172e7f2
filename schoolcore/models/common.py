# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared enums and the record base class for all entities.

Entities are plain pydantic records with snake_case attributes. Their
wire names are the camelCase names used by the existing persistence
collaborators (teacherId, createdAt, maxPoints, ...), so
``model_dump(by_alias=True)`` round-trips with stored payloads.
"""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid4())


class EntityModel(BaseModel):
    """Base for entity records.

    Accepts both attribute names and camelCase aliases on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict:
        """Dump to the camelCase JSON-compatible wire shape."""
        return self.model_dump(by_alias=True, mode="json")


class UserRole(str, Enum):
    """Roles a user can hold."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


class CourseStatus(str, Enum):
    """Course lifecycle status."""

    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


class MaterialType(str, Enum):
    """Kinds of module material."""

    TEXT = "text"
    VIDEO = "video"
    PDF = "pdf"
    LINK = "link"


class NotificationType(str, Enum):
    """Notification categories."""

    ANNOUNCEMENT = "announcement"
    ASSIGNMENT = "assignment"
    GRADE = "grade"
    SYSTEM = "system"


class EnrollmentStatus(str, Enum):
    """Enrollment status of a student in a course."""

    ACTIVE = "active"
    COMPLETED = "completed"
    DROPPED = "dropped"
