"""SchoolCore.

Domain-rule core for a school-management system: entity invariants,
role-based authorization, course event notifications and optional
course feature layers.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
