# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Logging for schoolcore.

Domain modules log diagnostics through ``logging.getLogger(__name__)``.
Course workflow operations additionally write one structured audit line
per successful mutation to the ``schoolcore.audit`` logger. The acting
user and the operation name are bound once per operation with
operation_context(), so every line written inside it carries them.

Example:
    >>> from schoolcore.utils.logging import setup_logging, operation_context
    >>> setup_logging(get_settings())
    >>> with operation_context("create_course", actor_id="t-1"):
    ...     get_audit_logger().info("course_created", course_id="c-1")
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from schoolcore.core.config.settings import Settings

AUDIT_LOGGER_NAME = "schoolcore.audit"

# Third-party loggers that are noisy below WARNING.
QUIET_LOGGERS = ("aiosmtplib", "asyncio")


def _renderer(settings: "Settings") -> list[Processor]:
    if settings.is_development or settings.debug:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging(settings: "Settings") -> None:
    """Configure stdlib and structlog output.

    Development and debug runs render audit lines for the console;
    everything else renders them as JSON, one object per line.

    Args:
        settings: Application settings providing log_level, environment
            and debug.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.UnicodeDecoder(),
            *_renderer(settings),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
        level=level,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("schoolcore").setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger by name."""
    return structlog.get_logger(name)


def get_audit_logger() -> structlog.stdlib.BoundLogger:
    """Get the logger that records course workflow mutations."""
    return get_logger(AUDIT_LOGGER_NAME)


@contextmanager
def operation_context(operation: str, **ids: object) -> Iterator[None]:
    """Bind an operation name and entity ids to structured log lines.

    The previous bindings are restored on exit, also when the operation
    raises.

    Args:
        operation: Name of the workflow operation, e.g. ``grade_submission``.
        **ids: Identifiers such as actor_id or course_id.
    """
    with structlog.contextvars.bound_contextvars(operation=operation, **ids):
        yield
