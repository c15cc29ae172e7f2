# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for SchoolCore.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Timezone-aware datetime operations
"""

from schoolcore.utils.datetime import (
    ceil_days_between,
    days_ago,
    days_from_now,
    ensure_utc,
    format_date,
    is_in_future,
    utc_now,
)
from schoolcore.utils.logging import (
    get_audit_logger,
    get_logger,
    operation_context,
    setup_logging,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "get_audit_logger",
    "operation_context",
    # Datetime
    "utc_now",
    "ensure_utc",
    "days_ago",
    "days_from_now",
    "is_in_future",
    "ceil_days_between",
    "format_date",
]
