# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course domain package.

This package provides the course workflow:
- CourseController: authoring, submissions, grading and announcements
- Creators for courses, modules, materials and assignments
- CourseCatalog lookup with an in-memory implementation
- Optional course features (time limit, premium, certificate)
- Read-only assignment and submission statistics
"""

from schoolcore.domains.course.catalog import CourseCatalog, InMemoryCourseCatalog
from schoolcore.domains.course.creator import (
    AssignmentCreator,
    CourseCreator,
    MaterialCreator,
    ModuleCreator,
)
from schoolcore.domains.course.experts import AssignmentExpert, SubmissionExpert
from schoolcore.domains.course.features import (
    FEATURE_PRIORITY,
    CertificateLayer,
    CourseFeature,
    CourseFeatureOptions,
    CourseLayer,
    CourseView,
    FeatureNotEnabledError,
    FeatureOrderError,
    PremiumLayer,
    TimeLimitedLayer,
    apply_layers,
    compose_course,
)
from schoolcore.domains.course.service import CourseController, OperationResult

__all__ = [
    # Controller
    "CourseController",
    "OperationResult",
    # Catalog
    "CourseCatalog",
    "InMemoryCourseCatalog",
    # Creators
    "CourseCreator",
    "ModuleCreator",
    "MaterialCreator",
    "AssignmentCreator",
    # Features
    "CourseFeature",
    "CourseFeatureOptions",
    "CourseLayer",
    "CourseView",
    "FEATURE_PRIORITY",
    "FeatureNotEnabledError",
    "FeatureOrderError",
    "TimeLimitedLayer",
    "PremiumLayer",
    "CertificateLayer",
    "apply_layers",
    "compose_course",
    # Experts
    "AssignmentExpert",
    "SubmissionExpert",
]
