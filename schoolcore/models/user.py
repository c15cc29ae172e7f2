# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User and actor records."""

from pydantic import Field

from schoolcore.models.common import EntityModel, UserRole, new_id


class User(EntityModel):
    """A person known to the system.

    The role is fixed at creation; the core has no role-change flow.
    """

    id: str = Field(default_factory=new_id)
    name: str
    email: str
    role: UserRole


class Actor(EntityModel):
    """Caller identity supplied by the external auth collaborator."""

    id: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "Actor":
        """Build an actor context from a full user record."""
        return cls(id=user.id, role=user.role)
