# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User creation by role."""

import logging
from typing import assert_never

from schoolcore.domains.constraints import (
    Constraint,
    check,
    first_violation,
    is_email_valid,
    is_valid_role,
)
from schoolcore.domains.exceptions import InvariantViolationError
from schoolcore.models.common import UserRole
from schoolcore.models.user import User

logger = logging.getLogger(__name__)


class UserFactory:
    """Creates users with a validated email and a fixed role."""

    def create_user(self, name: str, email: str, role: UserRole | str) -> User:
        """Create a user with the given role.

        Args:
            name: Display name.
            email: Email address.
            role: One of student, teacher, admin.

        Returns:
            The new user.

        Raises:
            InvariantViolationError: If the role is unknown or the email
                is malformed.
        """
        violation = first_violation(
            [
                check(Constraint.USER_ROLE, is_valid_role(role)),
                check(Constraint.USER_EMAIL, is_email_valid(email)),
            ]
        )
        if violation is not None:
            raise InvariantViolationError(
                violation.description,
                details={"constraint": violation.constraint.value, "email": email},
            )

        user_role = UserRole(role)
        match user_role:
            case UserRole.STUDENT:
                user = self.create_student(name, email)
            case UserRole.TEACHER:
                user = self.create_teacher(name, email)
            case UserRole.ADMIN:
                user = self.create_admin(name, email)
            case _:
                assert_never(user_role)

        logger.info("Created %s user %s", user.role.value, user.id)
        return user

    def create_student(self, name: str, email: str) -> User:
        return User(name=name, email=email, role=UserRole.STUDENT)

    def create_teacher(self, name: str, email: str) -> User:
        return User(name=name, email=email, role=UserRole.TEACHER)

    def create_admin(self, name: str, email: str) -> User:
        return User(name=name, email=email, role=UserRole.ADMIN)
