# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across the unit tests:
- Users of every role
- A course controller with explicit rule settings
- A course with one module
"""

from datetime import timedelta

import pytest

from schoolcore.core.config.settings import RuleSettings
from schoolcore.domains.course import CourseController, InMemoryCourseCatalog
from schoolcore.infrastructure.events import CourseSubjectRegistry
from schoolcore.models import Course, Module, User, UserRole
from schoolcore.utils.datetime import utc_now


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def teacher() -> User:
    """Provide a teacher."""
    return User(
        id="550e8400-e29b-41d4-a716-446655440010",
        name="Grace Hopper",
        email="grace@example.com",
        role=UserRole.TEACHER,
    )


@pytest.fixture
def other_teacher() -> User:
    """Provide a teacher who does not own the sample course."""
    return User(
        id="550e8400-e29b-41d4-a716-446655440011",
        name="Alan Turing",
        email="alan@example.com",
        role=UserRole.TEACHER,
    )


@pytest.fixture
def admin() -> User:
    """Provide an administrator."""
    return User(
        id="550e8400-e29b-41d4-a716-446655440020",
        name="Ada Admin",
        email="admin@example.com",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def student() -> User:
    """Provide a student."""
    return User(
        id="550e8400-e29b-41d4-a716-446655440001",
        name="Sam Student",
        email="sam@example.com",
        role=UserRole.STUDENT,
    )


@pytest.fixture
def second_student() -> User:
    """Provide a second student."""
    return User(
        id="550e8400-e29b-41d4-a716-446655440002",
        name="Kim Student",
        email="kim@example.com",
        role=UserRole.STUDENT,
    )


# =============================================================================
# Course Fixtures
# =============================================================================


@pytest.fixture
def rules() -> RuleSettings:
    """Provide rule settings independent of the environment."""
    return RuleSettings(passing_percentage=60.0, admin_courses_start_active=True)


@pytest.fixture
def controller(rules: RuleSettings) -> CourseController:
    """Provide a controller with its own catalog and subjects."""
    return CourseController(
        catalog=InMemoryCourseCatalog(),
        subjects=CourseSubjectRegistry(),
        rules=rules,
    )


@pytest.fixture
def course(controller: CourseController, teacher: User) -> Course:
    """Provide a draft course owned by the teacher."""
    return controller.create_course(
        teacher,
        "Introduction to Algebra",
        "Linear equations, inequalities and functions.",
    ).entity


@pytest.fixture
def module(controller: CourseController, teacher: User, course: Course) -> Module:
    """Provide the first module of the sample course."""
    return controller.add_module(
        teacher, course, "Linear Equations", "Solving equations in one variable."
    ).entity


@pytest.fixture
def due_date():
    """Provide a due date one week ahead."""
    return utc_now() + timedelta(days=7)
