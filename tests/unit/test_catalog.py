# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the in-memory course catalog."""

from datetime import datetime, timezone

import pytest

from schoolcore.domains.course import InMemoryCourseCatalog
from schoolcore.domains.exceptions import NotFoundError
from schoolcore.models import Assignment, Course, Module


@pytest.fixture
def course() -> Course:
    """Create a course with one module and one assignment."""
    course = Course(title="Biology", description="Cells and organisms.", teacher_id="t-1")
    module = Module(title="Cells", description="Cell basics", course_id=course.id, order=0)
    module.assignments.append(
        Assignment(
            title="Cell diagram",
            description="Label the parts of a cell.",
            due_date=datetime(2030, 1, 1, tzinfo=timezone.utc),
            module_id=module.id,
            max_points=10,
        )
    )
    course.modules.append(module)
    return course


class TestInMemoryCourseCatalog:
    """Tests for InMemoryCourseCatalog."""

    def test_add_indexes_tree(self, course: Course) -> None:
        """Test that modules and assignments become resolvable."""
        catalog = InMemoryCourseCatalog()
        catalog.add_course(course)

        module = course.modules[0]
        assignment = module.assignments[0]

        assert catalog.get_course(course.id) is course
        assert catalog.get_module(module.id) is module
        assert catalog.get_assignment(assignment.id) is assignment
        assert catalog.course_for_assignment(assignment.id) is course
        assert len(catalog) == 1

    def test_unknown_ids(self) -> None:
        """Test that unknown ids raise NotFoundError with details."""
        catalog = InMemoryCourseCatalog()

        with pytest.raises(NotFoundError) as exc_info:
            catalog.get_course("missing")
        assert exc_info.value.details == {"course_id": "missing"}

        with pytest.raises(NotFoundError):
            catalog.get_module("missing")
        with pytest.raises(NotFoundError):
            catalog.get_assignment("missing")
        with pytest.raises(NotFoundError):
            catalog.course_for_assignment("missing")

    def test_list_by_teacher(self, course: Course) -> None:
        """Test filtering courses by teacher."""
        catalog = InMemoryCourseCatalog()
        catalog.add_course(course)
        catalog.add_course(
            Course(title="Physics", description="Forces and motion.", teacher_id="t-2")
        )

        assert [c.id for c in catalog.list_courses(teacher_id="t-1")] == [course.id]
        assert len(catalog.list_courses()) == 2
