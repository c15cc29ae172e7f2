# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for UserFactory."""

import pytest

from schoolcore.domains.exceptions import InvariantViolationError
from schoolcore.domains.user import UserFactory
from schoolcore.models import UserRole


@pytest.fixture
def factory() -> UserFactory:
    """Create a user factory."""
    return UserFactory()


class TestCreateUser:
    """Tests for UserFactory.create_user."""

    @pytest.mark.parametrize("role", list(UserRole))
    def test_creates_each_role(self, factory: UserFactory, role: UserRole) -> None:
        """Test that every role produces a user with that role."""
        user = factory.create_user("Ada", "ada@example.com", role)

        assert user.role == role
        assert user.name == "Ada"
        assert user.email == "ada@example.com"
        assert user.id

    def test_role_as_string(self, factory: UserFactory) -> None:
        """Test that role values are accepted as strings."""
        user = factory.create_user("Ada", "ada@example.com", "teacher")

        assert user.role == UserRole.TEACHER

    def test_ids_are_unique(self, factory: UserFactory) -> None:
        """Test that each user gets a fresh id."""
        first = factory.create_user("Ada", "ada@example.com", UserRole.STUDENT)
        second = factory.create_user("Ada", "ada@example.com", UserRole.STUDENT)

        assert first.id != second.id

    def test_invalid_email(self, factory: UserFactory) -> None:
        """Test that malformed emails are rejected."""
        with pytest.raises(InvariantViolationError) as exc_info:
            factory.create_user("Ada", "not-an-email", UserRole.STUDENT)

        assert exc_info.value.constraint == "Email must be a valid email address."
        assert exc_info.value.details["constraint"] == "user.email"

    def test_unknown_role(self, factory: UserFactory) -> None:
        """Test that unknown roles are rejected."""
        with pytest.raises(InvariantViolationError) as exc_info:
            factory.create_user("Ada", "ada@example.com", "parent")

        assert exc_info.value.details["constraint"] == "user.role"
