# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for assignment and submission statistics."""

from datetime import datetime, timedelta, timezone

import pytest

from schoolcore.domains.course import AssignmentExpert, SubmissionExpert
from schoolcore.models import Assignment, Submission

DUE = datetime(2030, 1, 10, 23, 59, tzinfo=timezone.utc)


def make_submission(
    assignment: Assignment,
    student_id: str,
    submitted_at: datetime = DUE - timedelta(hours=1),
    grade: float | None = None,
    feedback: str | None = None,
) -> Submission:
    """Append a submission to the assignment."""
    submission = Submission(
        student_id=student_id,
        assignment_id=assignment.id,
        content="answer",
        submitted_at=submitted_at,
        grade=grade,
        feedback=feedback,
    )
    assignment.submissions.append(submission)
    return submission


@pytest.fixture
def assignment() -> Assignment:
    """Create an assignment worth 20 points."""
    return Assignment(
        title="Essay",
        description="Write about algebra.",
        due_date=DUE,
        module_id="m-1",
        max_points=20,
    )


class TestAssignmentExpert:
    """Tests for AssignmentExpert."""

    def test_average_grade_without_grades_is_zero(self, assignment: Assignment) -> None:
        """Test that no graded submissions gives 0."""
        make_submission(assignment, "s-1")

        assert AssignmentExpert(assignment).average_grade() == 0

    def test_average_grade_ignores_ungraded(self, assignment: Assignment) -> None:
        """Test the mean over graded submissions only."""
        make_submission(assignment, "s-1", grade=10)
        make_submission(assignment, "s-2", grade=20)
        make_submission(assignment, "s-3")

        assert AssignmentExpert(assignment).average_grade() == 15

    def test_counts(self, assignment: Assignment) -> None:
        """Test submission, graded and late counts."""
        make_submission(assignment, "s-1", grade=10)
        make_submission(assignment, "s-2", submitted_at=DUE + timedelta(minutes=1))
        make_submission(assignment, "s-3", submitted_at=DUE)

        expert = AssignmentExpert(assignment)

        assert expert.submission_count() == 3
        assert expert.graded_count() == 1
        assert expert.late_submission_count() == 1

    def test_student_lookup(self, assignment: Assignment) -> None:
        """Test lookup of a student's submission."""
        submission = make_submission(assignment, "s-1")
        expert = AssignmentExpert(assignment)

        assert expert.has_student_submitted("s-1")
        assert not expert.has_student_submitted("s-2")
        assert expert.get_student_submission("s-1") is submission
        assert expert.get_student_submission("s-2") is None

    def test_all_graded(self, assignment: Assignment) -> None:
        """Test that an assignment without submissions is not fully graded."""
        expert = AssignmentExpert(assignment)
        assert not expert.are_all_submissions_graded()

        make_submission(assignment, "s-1", grade=5)
        assert expert.are_all_submissions_graded()

        make_submission(assignment, "s-2")
        assert not expert.are_all_submissions_graded()


class TestSubmissionExpert:
    """Tests for SubmissionExpert."""

    def test_ungraded(self, assignment: Assignment) -> None:
        """Test values before grading."""
        expert = SubmissionExpert(make_submission(assignment, "s-1"), assignment)

        assert not expert.is_graded()
        assert expert.points_achieved() == 0
        assert expert.percentage_score() == 0
        assert not expert.is_passing()

    def test_percentage_and_passing(self, assignment: Assignment) -> None:
        """Test percentage score and the 60% passing line."""
        passing = SubmissionExpert(make_submission(assignment, "s-1", grade=12), assignment)
        failing = SubmissionExpert(make_submission(assignment, "s-2", grade=11), assignment)

        assert passing.percentage_score() == 60
        assert passing.is_passing()
        assert failing.percentage_score() == 55
        assert not failing.is_passing()

    def test_custom_passing_percentage(self, assignment: Assignment) -> None:
        """Test a configured passing percentage."""
        expert = SubmissionExpert(
            make_submission(assignment, "s-1", grade=12), assignment, passing_percentage=75
        )

        assert not expert.is_passing()

    def test_zero_max_points(self, assignment: Assignment) -> None:
        """Test that zero-point assignments score 0 percent."""
        assignment.max_points = 0
        expert = SubmissionExpert(make_submission(assignment, "s-1", grade=0), assignment)

        assert expert.percentage_score() == 0

    @pytest.mark.parametrize(
        "delay,late,days",
        [
            (timedelta(hours=-1), False, 0),
            (timedelta(0), False, 0),
            (timedelta(seconds=1), True, 1),
            (timedelta(days=1), True, 1),
            (timedelta(days=1, minutes=1), True, 2),
        ],
    )
    def test_lateness(
        self, assignment: Assignment, delay: timedelta, late: bool, days: int
    ) -> None:
        """Test strict lateness and days rounded up."""
        expert = SubmissionExpert(
            make_submission(assignment, "s-1", submitted_at=DUE + delay), assignment
        )

        assert expert.is_late() is late
        assert expert.days_late() == days

    @pytest.mark.parametrize(
        "feedback,expected",
        [(None, False), ("", False), ("   ", False), ("Good job", True)],
    )
    def test_has_feedback(
        self, assignment: Assignment, feedback: str | None, expected: bool
    ) -> None:
        """Test that blank feedback does not count."""
        expert = SubmissionExpert(
            make_submission(assignment, "s-1", feedback=feedback), assignment
        )

        assert expert.has_feedback() is expected
