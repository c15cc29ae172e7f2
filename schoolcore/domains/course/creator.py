# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Creators for course aggregate entities.

Each creator builds one kind of entity and appends it to the aggregate
that owns it. New children are placed at the end: their order is the
number of siblings present at insertion. Creators do not authorize or
validate; CourseController does both before delegating here.
"""

from datetime import datetime

from schoolcore.models.assignment import Assignment
from schoolcore.models.common import CourseStatus, MaterialType
from schoolcore.models.course import Course, Material, Module


class CourseCreator:
    """Builds new courses."""

    def create(
        self,
        title: str,
        description: str,
        teacher_id: str,
        status: CourseStatus = CourseStatus.DRAFT,
    ) -> Course:
        """Create a course owned by the given teacher (or admin)."""
        return Course(
            title=title,
            description=description,
            teacher_id=teacher_id,
            status=status,
        )


class ModuleCreator:
    """Builds modules and appends them to their course."""

    def create(self, course: Course, title: str, description: str) -> Module:
        """Append a new module at the end of the course."""
        module = Module(
            title=title,
            description=description,
            course_id=course.id,
            order=len(course.modules),
        )
        course.modules.append(module)
        course.touch()
        return module


class MaterialCreator:
    """Builds materials and appends them to their module."""

    def create(
        self,
        module: Module,
        title: str,
        type: MaterialType,
        content: str,
    ) -> Material:
        """Append a new material at the end of the module."""
        material = Material(
            title=title,
            type=type,
            content=content,
            module_id=module.id,
            order=len(module.materials),
        )
        module.materials.append(material)
        return material


class AssignmentCreator:
    """Builds assignments and appends them to their module."""

    def create(
        self,
        module: Module,
        title: str,
        description: str,
        due_date: datetime,
        max_points: float,
    ) -> Assignment:
        """Append a new assignment to the module."""
        assignment = Assignment(
            title=title,
            description=description,
            due_date=due_date,
            module_id=module.id,
            max_points=max_points,
        )
        module.assignments.append(assignment)
        return assignment
