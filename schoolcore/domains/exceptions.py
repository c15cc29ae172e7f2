# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions raised by domain operations.

Every failure is local and recoverable by the caller: retry with corrected
input or abandon. An operation that raises has performed no mutation.
"""

from typing import Any


class SchoolCoreError(Exception):
    """Base exception for domain operation errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnauthorizedError(SchoolCoreError):
    """Raised when the actor's role or ownership fails an authorization rule."""

    pass


class InvariantViolationError(SchoolCoreError):
    """Raised when a constraint predicate fails.

    Attributes:
        constraint: Human-readable description of the violated constraint.
    """

    def __init__(
        self,
        constraint: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(constraint, details)
        self.constraint = constraint


class NotFoundError(SchoolCoreError):
    """Raised when a referenced module, assignment or submission is missing."""

    pass
