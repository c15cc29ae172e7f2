# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Lookup of courses and the entities they own.

CourseController needs to find the course and assignment that own a
submission when it is graded. The CourseCatalog protocol is that lookup;
InMemoryCourseCatalog is the bundled implementation. Hosts with their own
storage provide a catalog backed by it.
"""

import threading
from typing import Protocol

from schoolcore.domains.exceptions import NotFoundError
from schoolcore.models.assignment import Assignment
from schoolcore.models.course import Course, Module


class CourseCatalog(Protocol):
    """Lookup of courses, modules and assignments by id."""

    def add_course(self, course: Course) -> None:
        """Store a course and index everything it owns."""
        ...

    def get_course(self, course_id: str) -> Course:
        """Get a course by id. Raises NotFoundError if unknown."""
        ...

    def list_courses(self, teacher_id: str | None = None) -> list[Course]:
        """List stored courses, optionally only those of one teacher."""
        ...

    def get_module(self, module_id: str) -> Module:
        """Get a module by id. Raises NotFoundError if unknown."""
        ...

    def get_assignment(self, assignment_id: str) -> Assignment:
        """Get an assignment by id. Raises NotFoundError if unknown."""
        ...

    def course_for_assignment(self, assignment_id: str) -> Course:
        """Get the course owning an assignment. Raises NotFoundError if unknown."""
        ...


class InMemoryCourseCatalog:
    """Course catalog held in process memory."""

    def __init__(self) -> None:
        self._courses: dict[str, Course] = {}
        self._modules: dict[str, Module] = {}
        self._assignments: dict[str, Assignment] = {}
        self._assignment_courses: dict[str, str] = {}
        self._lock = threading.Lock()

    def add_course(self, course: Course) -> None:
        """Store a course, replacing any course with the same id."""
        with self._lock:
            self._courses[course.id] = course
            for module in course.modules:
                self._modules[module.id] = module
                for assignment in module.assignments:
                    self._assignments[assignment.id] = assignment
                    self._assignment_courses[assignment.id] = course.id

    def get_course(self, course_id: str) -> Course:
        with self._lock:
            course = self._courses.get(course_id)
        if course is None:
            raise NotFoundError(
                f"Course not found: {course_id}",
                details={"course_id": course_id},
            )
        return course

    def list_courses(self, teacher_id: str | None = None) -> list[Course]:
        with self._lock:
            courses = list(self._courses.values())
        if teacher_id is not None:
            courses = [c for c in courses if c.teacher_id == teacher_id]
        return courses

    def get_module(self, module_id: str) -> Module:
        with self._lock:
            module = self._modules.get(module_id)
        if module is None:
            raise NotFoundError(
                f"Module not found: {module_id}",
                details={"module_id": module_id},
            )
        return module

    def get_assignment(self, assignment_id: str) -> Assignment:
        with self._lock:
            assignment = self._assignments.get(assignment_id)
        if assignment is None:
            raise NotFoundError(
                f"Assignment not found: {assignment_id}",
                details={"assignment_id": assignment_id},
            )
        return assignment

    def course_for_assignment(self, assignment_id: str) -> Course:
        with self._lock:
            course_id = self._assignment_courses.get(assignment_id)
        if course_id is None:
            raise NotFoundError(
                f"No course owns assignment: {assignment_id}",
                details={"assignment_id": assignment_id},
            )
        return self.get_course(course_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._courses)
