# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course aggregate records: Course, Module and Material.

A Course owns its Modules; a Module owns its Materials and Assignments.
"""

from datetime import datetime

from pydantic import Field

from schoolcore.models.assignment import Assignment
from schoolcore.models.common import CourseStatus, EntityModel, MaterialType, new_id
from schoolcore.utils.datetime import utc_now


class Material(EntityModel):
    """A piece of learning content inside a module."""

    id: str = Field(default_factory=new_id)
    title: str
    type: MaterialType
    content: str
    module_id: str
    order: int


class Module(EntityModel):
    """An ordered section of a course."""

    id: str = Field(default_factory=new_id)
    title: str
    description: str
    course_id: str
    order: int
    materials: list[Material] = Field(default_factory=list)
    assignments: list[Assignment] = Field(default_factory=list)


class Course(EntityModel):
    """A course taught by a teacher (or owned by an admin)."""

    id: str = Field(default_factory=new_id)
    title: str
    description: str
    teacher_id: str
    status: CourseStatus = CourseStatus.DRAFT
    modules: list[Module] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def find_module(self, module_id: str) -> Module | None:
        """Return the module with the given id, if this course owns it."""
        return next((m for m in self.modules if m.id == module_id), None)

    def touch(self) -> None:
        """Bump updated_at after a structural mutation."""
        self.updated_at = utc_now()
