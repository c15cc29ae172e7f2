# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Assignment, Submission and Grade records."""

from datetime import datetime

from pydantic import Field

from schoolcore.models.common import EntityModel, new_id
from schoolcore.utils.datetime import utc_now


class Submission(EntityModel):
    """A student's answer to an assignment.

    ``grade`` and ``feedback`` stay None until the submission is graded.
    """

    id: str = Field(default_factory=new_id)
    student_id: str
    assignment_id: str
    content: str
    submitted_at: datetime = Field(default_factory=utc_now)
    grade: float | None = None
    feedback: str | None = None


class Assignment(EntityModel):
    """Graded work attached to a module."""

    id: str = Field(default_factory=new_id)
    title: str
    description: str
    due_date: datetime
    module_id: str
    max_points: float
    submissions: list[Submission] = Field(default_factory=list)

    def find_submission(self, submission_id: str) -> Submission | None:
        """Return the submission with the given id, if present."""
        return next((s for s in self.submissions if s.id == submission_id), None)


class Grade(EntityModel):
    """The grade given to one student's submission."""

    id: str = Field(default_factory=new_id)
    value: float
    feedback: str | None = None
    assignment_id: str
    student_id: str
    graded_by: str
    graded_at: datetime = Field(default_factory=utc_now)
