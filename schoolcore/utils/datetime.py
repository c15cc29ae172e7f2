# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for SchoolCore.

All timestamps held by entities are timezone-aware UTC. Inputs supplied by
callers (due dates, access end dates) may be naive; they are interpreted
as UTC by ensure_utc() before any comparison so that naive/aware mixing
never raises inside a rule check.

Usage:
------
    from schoolcore.utils.datetime import utc_now

    # Pydantic model defaults
    created_at: datetime = Field(default_factory=utc_now)
"""

import math
from datetime import datetime, timedelta, timezone

SECONDS_PER_DAY = 24 * 60 * 60


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware UTC.

    Args:
        dt: A datetime object (naive or aware) or None.

    Returns:
        Timezone-aware UTC datetime or None.

    Note:
        - If dt is None, returns None
        - If dt is naive, assumes UTC and adds tzinfo
        - If dt is aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def days_from_now(days: int) -> datetime:
    """Get a datetime N days from now.

    Args:
        days: Number of days to add.

    Returns:
        Timezone-aware UTC datetime.
    """
    return utc_now() + timedelta(days=days)


def days_ago(days: int) -> datetime:
    """Get a datetime N days ago from now."""
    return utc_now() - timedelta(days=days)


def is_in_future(target: datetime, reference: datetime | None = None) -> bool:
    """Check whether target lies strictly after reference (default: now).

    Args:
        target: The datetime to check.
        reference: Point of comparison, defaults to the current UTC time.

    Returns:
        True if target > reference.
    """
    reference_utc = ensure_utc(reference) if reference is not None else utc_now()
    return ensure_utc(target) > reference_utc


def ceil_days_between(start: datetime, end: datetime) -> int:
    """Number of started days from start to end, rounded up.

    A difference of one second counts as one day. Non-positive
    differences return 0.

    Args:
        start: Earlier datetime.
        end: Later datetime.

    Returns:
        ceil((end - start) / 1 day), floored at 0.
    """
    seconds = (ensure_utc(end) - ensure_utc(start)).total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / SECONDS_PER_DAY)


def format_date(dt: datetime) -> str:
    """Format the calendar date of a datetime (UTC) as YYYY-MM-DD."""
    return ensure_utc(dt).date().isoformat()
