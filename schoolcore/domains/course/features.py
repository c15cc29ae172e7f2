# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Optional course features layered onto a read-only course view.

A CourseView is an immutable snapshot of a course's presentation
(title, description, modules). Features are pure layers that return a
new view with an adjusted title or description and extra capabilities:

- TimeLimitedLayer: access ends at a given date
- PremiumLayer: exclusive extra materials
- CertificateLayer: a certificate can be generated per student

Layers always apply in a fixed order (time limit, premium, certificate)
regardless of the order they are requested in, so the same course and
options always produce equal views. The Course itself is never changed.

Example:
    >>> options = CourseFeatureOptions(
    ...     certificate_template="Awarded to {studentName}",
    ...     extra_materials=["Bonus lecture"],
    ... )
    >>> view = compose_course(course, options)
    >>> view.title
    'Algebra I (Premium) (Certificate Available)'
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from schoolcore.domains.exceptions import SchoolCoreError
from schoolcore.models.course import Course, Module
from schoolcore.utils.datetime import ensure_utc, format_date, utc_now

CERTIFICATE_PLACEHOLDER = "{studentName}"
PREMIUM_NOTE = "This premium course includes exclusive materials."


class CourseFeature(str, Enum):
    """Optional features a course view can carry."""

    TIME_LIMITED = "time_limited"
    PREMIUM = "premium"
    CERTIFICATE = "certificate"


# Lower runs first.
FEATURE_PRIORITY: dict[CourseFeature, int] = {
    CourseFeature.TIME_LIMITED: 1,
    CourseFeature.PREMIUM: 2,
    CourseFeature.CERTIFICATE: 3,
}


class FeatureNotEnabledError(SchoolCoreError):
    """Raised when a view is asked for a capability it does not carry."""

    pass


class FeatureOrderError(SchoolCoreError):
    """Raised when a layer is applied twice or after a higher-priority one."""

    pass


@dataclass(frozen=True)
class CourseView:
    """Immutable presentation of a course with its applied features.

    Attributes:
        id: Course id.
        title: Display title, including feature suffixes.
        description: Display description, including feature notes.
        modules: Snapshot of the course modules.
        features: Applied features, in application order.
        access_end_date: End of access, for time-limited views.
        extra_materials: Exclusive materials, for premium views.
        certificate_template: Certificate text, for certificate views.
    """

    id: str
    title: str
    description: str
    modules: tuple[Module, ...] = ()
    features: tuple[CourseFeature, ...] = ()
    access_end_date: datetime | None = None
    extra_materials: tuple[str, ...] = ()
    certificate_template: str | None = None

    @classmethod
    def from_course(cls, course: Course) -> "CourseView":
        """Snapshot a course without any features."""
        return cls(
            id=course.id,
            title=course.title,
            description=course.description,
            modules=tuple(m.model_copy(deep=True) for m in course.modules),
        )

    def has_feature(self, feature: CourseFeature) -> bool:
        """Check whether a feature has been applied."""
        return feature in self.features

    def is_accessible(self, now: datetime | None = None) -> bool:
        """Check whether the course can still be accessed.

        Always True for views without a time limit.

        Args:
            now: Point in time to check, defaults to the current UTC time.
        """
        if self.access_end_date is None:
            return True
        reference = ensure_utc(now) if now is not None else utc_now()
        return reference < self.access_end_date

    def get_extra_materials(self) -> list[str]:
        """Exclusive materials of a premium view (empty otherwise)."""
        return list(self.extra_materials)

    def generate_certificate(self, student_name: str) -> str:
        """Fill in the certificate template for a student.

        Raises:
            FeatureNotEnabledError: If the view has no certificate feature.
        """
        if self.certificate_template is None:
            raise FeatureNotEnabledError(
                "Course does not offer certificates",
                details={"course_id": self.id},
            )
        return self.certificate_template.replace(CERTIFICATE_PLACEHOLDER, student_name)


@dataclass(frozen=True)
class TimeLimitedLayer:
    """Limits access to the course until a date."""

    access_end_date: datetime

    feature: ClassVar[CourseFeature] = CourseFeature.TIME_LIMITED

    def apply(self, view: CourseView) -> CourseView:
        end = ensure_utc(self.access_end_date)
        return replace(
            view,
            description=f"{view.description}\n\nAccess until: {format_date(end)}",
            access_end_date=end,
            features=(*view.features, self.feature),
        )


@dataclass(frozen=True)
class PremiumLayer:
    """Marks the course as premium with exclusive materials."""

    extra_materials: tuple[str, ...] = ()

    feature: ClassVar[CourseFeature] = CourseFeature.PREMIUM

    def apply(self, view: CourseView) -> CourseView:
        return replace(
            view,
            title=f"{view.title} (Premium)",
            description=f"{view.description}\n\n{PREMIUM_NOTE}",
            extra_materials=tuple(self.extra_materials),
            features=(*view.features, self.feature),
        )


@dataclass(frozen=True)
class CertificateLayer:
    """Offers a completion certificate."""

    template: str

    feature: ClassVar[CourseFeature] = CourseFeature.CERTIFICATE

    def apply(self, view: CourseView) -> CourseView:
        return replace(
            view,
            title=f"{view.title} (Certificate Available)",
            certificate_template=self.template,
            features=(*view.features, self.feature),
        )


CourseLayer = TimeLimitedLayer | PremiumLayer | CertificateLayer


class CourseFeatureOptions(BaseModel):
    """Which features to compose onto a course.

    A feature is applied when its option is set.

    Attributes:
        access_end_date: Enables the time limit.
        extra_materials: Enables premium (an empty list still enables it).
        certificate_template: Enables certificates.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    access_end_date: datetime | None = None
    extra_materials: list[str] | None = None
    certificate_template: str | None = None

    def layers(self) -> list[CourseLayer]:
        """Build the layers for the set options."""
        layers: list[CourseLayer] = []
        if self.access_end_date is not None:
            layers.append(TimeLimitedLayer(self.access_end_date))
        if self.extra_materials is not None:
            layers.append(PremiumLayer(tuple(self.extra_materials)))
        if self.certificate_template is not None:
            layers.append(CertificateLayer(self.certificate_template))
        return layers


def apply_layers(view: CourseView, layers: list[CourseLayer]) -> CourseView:
    """Apply layers to a view in feature priority order.

    Args:
        view: Starting view.
        layers: Layers to apply, in any order.

    Returns:
        New view with every layer applied.

    Raises:
        FeatureOrderError: If a layer's feature is already applied, or
            would run after a feature of higher priority already on the view.
    """
    for layer in sorted(layers, key=lambda lay: FEATURE_PRIORITY[lay.feature]):
        priority = FEATURE_PRIORITY[layer.feature]
        applied = [FEATURE_PRIORITY[f] for f in view.features]
        if applied and priority <= max(applied):
            raise FeatureOrderError(
                f"Cannot apply {layer.feature.value} to a view that already has "
                f"{', '.join(f.value for f in view.features)}",
                details={
                    "feature": layer.feature.value,
                    "applied": [f.value for f in view.features],
                },
            )
        view = layer.apply(view)
    return view


def compose_course(
    course: Course,
    options: CourseFeatureOptions | None = None,
) -> CourseView:
    """Build the view of a course with the requested features."""
    view = CourseView.from_course(course)
    if options is None:
        return view
    return apply_layers(view, options.layers())
