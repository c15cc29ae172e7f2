# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User domain package.

Provides UserFactory for creating users of a given role.
"""

from schoolcore.domains.user.factory import UserFactory

__all__ = [
    "UserFactory",
]
