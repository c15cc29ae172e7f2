# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for course feature composition."""

from datetime import datetime, timezone

import pytest

from schoolcore.domains.course import (
    CertificateLayer,
    CourseFeature,
    CourseFeatureOptions,
    CourseView,
    FeatureNotEnabledError,
    FeatureOrderError,
    PremiumLayer,
    TimeLimitedLayer,
    apply_layers,
    compose_course,
)
from schoolcore.models import Course, Module

END_DATE = datetime(2030, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def base_course() -> Course:
    """Create a course with one module."""
    course = Course(
        title="Algebra I",
        description="Foundations of algebra.",
        teacher_id="t-1",
    )
    course.modules.append(
        Module(title="Week 1", description="Basics", course_id=course.id, order=0)
    )
    return course


class TestComposeCourse:
    """Tests for compose_course."""

    def test_without_options(self, base_course: Course) -> None:
        """Test that a plain view mirrors the course."""
        view = compose_course(base_course)

        assert view.title == "Algebra I"
        assert view.description == "Foundations of algebra."
        assert view.features == ()
        assert len(view.modules) == 1
        assert view.is_accessible()
        assert view.get_extra_materials() == []

    def test_all_features(self, base_course: Course) -> None:
        """Test the title and description with every feature applied."""
        options = CourseFeatureOptions(
            access_end_date=END_DATE,
            extra_materials=["Bonus lecture", "Workbook"],
            certificate_template="Awarded to {studentName}",
        )

        view = compose_course(base_course, options)

        assert view.title == "Algebra I (Premium) (Certificate Available)"
        assert view.description == (
            "Foundations of algebra."
            "\n\nAccess until: 2030-03-15"
            "\n\nThis premium course includes exclusive materials."
        )
        assert view.features == (
            CourseFeature.TIME_LIMITED,
            CourseFeature.PREMIUM,
            CourseFeature.CERTIFICATE,
        )
        assert view.get_extra_materials() == ["Bonus lecture", "Workbook"]
        assert view.generate_certificate("Sam") == "Awarded to Sam"

    def test_options_from_camel_case_payload(self, base_course: Course) -> None:
        """Test that request payloads with camelCase keys are accepted."""
        payload = {
            "certificateTemplate": "Awarded to {studentName}",
            "extraMaterials": [],
            "accessEndDate": "2030-03-15T12:00:00Z",
        }

        view = compose_course(base_course, CourseFeatureOptions.model_validate(payload))

        assert view.title == "Algebra I (Premium) (Certificate Available)"
        assert view.access_end_date == END_DATE

    def test_same_inputs_give_equal_views(self, base_course: Course) -> None:
        """Test that composition is deterministic."""
        options = CourseFeatureOptions(extra_materials=["Bonus"], access_end_date=END_DATE)

        assert compose_course(base_course, options) == compose_course(base_course, options)

    def test_course_is_not_mutated(self, base_course: Course) -> None:
        """Test that the base course keeps its title and description."""
        options = CourseFeatureOptions(
            extra_materials=["Bonus"], certificate_template="{studentName}"
        )

        view = compose_course(base_course, options)
        view.modules[0].title = "Changed in view"

        assert base_course.title == "Algebra I"
        assert base_course.description == "Foundations of algebra."
        assert base_course.modules[0].title == "Week 1"


class TestApplyLayers:
    """Tests for layer ordering."""

    @pytest.mark.parametrize(
        "layers",
        [
            [CertificateLayer("c"), PremiumLayer(()), TimeLimitedLayer(END_DATE)],
            [PremiumLayer(()), TimeLimitedLayer(END_DATE), CertificateLayer("c")],
            [TimeLimitedLayer(END_DATE), CertificateLayer("c"), PremiumLayer(())],
        ],
    )
    def test_request_order_does_not_matter(
        self, base_course: Course, layers: list
    ) -> None:
        """Test that layers always apply in priority order."""
        view = apply_layers(CourseView.from_course(base_course), layers)

        assert view.title == "Algebra I (Premium) (Certificate Available)"
        assert view.features == (
            CourseFeature.TIME_LIMITED,
            CourseFeature.PREMIUM,
            CourseFeature.CERTIFICATE,
        )

    def test_duplicate_feature_rejected(self, base_course: Course) -> None:
        """Test that a feature cannot be applied twice."""
        view = apply_layers(CourseView.from_course(base_course), [PremiumLayer(())])

        with pytest.raises(FeatureOrderError) as exc_info:
            apply_layers(view, [PremiumLayer(())])

        assert exc_info.value.details == {"feature": "premium", "applied": ["premium"]}

    def test_lower_priority_after_higher_rejected(self, base_course: Course) -> None:
        """Test that a time limit cannot be added after a certificate."""
        view = apply_layers(CourseView.from_course(base_course), [CertificateLayer("c")])

        with pytest.raises(FeatureOrderError):
            apply_layers(view, [TimeLimitedLayer(END_DATE)])

    def test_higher_priority_can_follow(self, base_course: Course) -> None:
        """Test that layers can be added in later calls in priority order."""
        view = apply_layers(CourseView.from_course(base_course), [PremiumLayer(())])
        view = apply_layers(view, [CertificateLayer("c")])

        assert view.title == "Algebra I (Premium) (Certificate Available)"


class TestCourseViewCapabilities:
    """Tests for feature capabilities on the view."""

    def test_time_limited_access(self, base_course: Course) -> None:
        """Test access ends at the end date."""
        view = compose_course(base_course, CourseFeatureOptions(access_end_date=END_DATE))

        assert view.is_accessible(datetime(2030, 3, 15, 11, 59, tzinfo=timezone.utc))
        assert not view.is_accessible(END_DATE)
        assert not view.is_accessible(datetime(2031, 1, 1, tzinfo=timezone.utc))

    def test_naive_end_date_is_utc(self, base_course: Course) -> None:
        """Test that naive end dates are interpreted as UTC."""
        view = compose_course(
            base_course, CourseFeatureOptions(access_end_date=datetime(2030, 3, 15, 12, 0))
        )

        assert view.access_end_date == END_DATE

    def test_certificate_requires_feature(self, base_course: Course) -> None:
        """Test that certificates are only generated for certificate courses."""
        view = compose_course(base_course)

        with pytest.raises(FeatureNotEnabledError):
            view.generate_certificate("Sam")

    def test_certificate_replaces_placeholder(self, base_course: Course) -> None:
        """Test placeholder substitution."""
        view = compose_course(
            base_course,
            CourseFeatureOptions(certificate_template="Certificate: {studentName}, Algebra I"),
        )

        assert view.generate_certificate("Kim Lee") == "Certificate: Kim Lee, Algebra I"
        assert view.has_feature(CourseFeature.CERTIFICATE)
        assert not view.has_feature(CourseFeature.PREMIUM)

    def test_view_is_frozen(self, base_course: Course) -> None:
        """Test that views cannot be changed in place."""
        view = compose_course(base_course)

        with pytest.raises(AttributeError):
            view.title = "Changed"  # type: ignore[misc]
