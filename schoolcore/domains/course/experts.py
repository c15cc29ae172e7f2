# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Read-only statistics over assignments and submissions.

Experts compute derived values from the records they wrap. They never
mutate records and never raise events.
"""

from schoolcore.models.assignment import Assignment, Submission
from schoolcore.utils.datetime import ceil_days_between, ensure_utc

DEFAULT_PASSING_PERCENTAGE = 60.0


def _submitted_late(submission: Submission, assignment: Assignment) -> bool:
    return ensure_utc(submission.submitted_at) > ensure_utc(assignment.due_date)


class AssignmentExpert:
    """Statistics over one assignment's submissions."""

    def __init__(self, assignment: Assignment) -> None:
        self.assignment = assignment

    def submission_count(self) -> int:
        return len(self.assignment.submissions)

    def graded_count(self) -> int:
        return sum(1 for s in self.assignment.submissions if s.grade is not None)

    def average_grade(self) -> float:
        """Mean grade of graded submissions, 0 when none are graded."""
        grades = [s.grade for s in self.assignment.submissions if s.grade is not None]
        if not grades:
            return 0.0
        return sum(grades) / len(grades)

    def late_submission_count(self) -> int:
        """Submissions made strictly after the due date."""
        return sum(
            1 for s in self.assignment.submissions if _submitted_late(s, self.assignment)
        )

    def has_student_submitted(self, student_id: str) -> bool:
        return any(s.student_id == student_id for s in self.assignment.submissions)

    def get_student_submission(self, student_id: str) -> Submission | None:
        return next(
            (s for s in self.assignment.submissions if s.student_id == student_id),
            None,
        )

    def are_all_submissions_graded(self) -> bool:
        """True when there is at least one submission and all are graded."""
        submissions = self.assignment.submissions
        return bool(submissions) and all(s.grade is not None for s in submissions)


class SubmissionExpert:
    """Derived values for one submission against its assignment.

    Attributes:
        submission: The submission being inspected.
        assignment: The assignment it answers.
        passing_percentage: Minimum percentage counted as passing.
    """

    def __init__(
        self,
        submission: Submission,
        assignment: Assignment,
        passing_percentage: float = DEFAULT_PASSING_PERCENTAGE,
    ) -> None:
        self.submission = submission
        self.assignment = assignment
        self.passing_percentage = passing_percentage

    def is_graded(self) -> bool:
        return self.submission.grade is not None

    def points_achieved(self) -> float:
        """Grade value, 0 when ungraded."""
        return self.submission.grade or 0.0

    def percentage_score(self) -> float:
        """Grade as a percentage of max points.

        0 when ungraded, and 0 for assignments worth 0 points.
        """
        if not self.is_graded() or self.assignment.max_points == 0:
            return 0.0
        return self.points_achieved() * 100 / self.assignment.max_points

    def is_late(self) -> bool:
        """Submitted strictly after the due date."""
        return _submitted_late(self.submission, self.assignment)

    def days_late(self) -> int:
        """Started days past the due date, 0 when on time."""
        if not self.is_late():
            return 0
        return ceil_days_between(self.assignment.due_date, self.submission.submitted_at)

    def is_passing(self) -> bool:
        return self.is_graded() and self.percentage_score() >= self.passing_percentage

    def has_feedback(self) -> bool:
        """Feedback is present and not blank."""
        feedback = self.submission.feedback
        return feedback is not None and feedback.strip() != ""
