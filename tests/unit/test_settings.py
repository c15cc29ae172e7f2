# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for application settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from schoolcore.core.config.settings import (
    RuleSettings,
    Settings,
    SMTPSettings,
    clear_settings_cache,
    get_settings,
)


class TestRuleSettings:
    """Tests for RuleSettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = RuleSettings()

        assert settings.passing_percentage == 60.0
        assert settings.admin_courses_start_active is True

    def test_loads_from_environment(self) -> None:
        """Test that settings load from environment variables."""
        env = {
            "RULES_PASSING_PERCENTAGE": "75",
            "RULES_ADMIN_COURSES_START_ACTIVE": "false",
        }

        with patch.dict(os.environ, env, clear=False):
            settings = RuleSettings()

        assert settings.passing_percentage == 75.0
        assert settings.admin_courses_start_active is False

    def test_passing_percentage_bounds(self) -> None:
        """Test that the passing percentage must be within 0..100."""
        with pytest.raises(ValidationError):
            RuleSettings(passing_percentage=101)


class TestSMTPSettings:
    """Tests for SMTPSettings."""

    def test_not_configured_by_default(self) -> None:
        """Test that SMTP is off until every value is set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = SMTPSettings()

        assert settings.port == 587
        assert settings.use_tls is True
        assert settings.is_configured is False

    def test_configured_from_environment(self) -> None:
        """Test SMTP settings from environment variables."""
        env = {
            "SMTP_HOST": "smtp.example.com",
            "SMTP_USERNAME": "mailer",
            "SMTP_PASSWORD": "secret",
            "SMTP_FROM_EMAIL": "noreply@example.com",
            "SMTP_FROM_NAME": "Springfield High",
        }

        with patch.dict(os.environ, env, clear=True):
            settings = SMTPSettings()

        assert settings.is_configured is True
        assert settings.password is not None
        assert settings.password.get_secret_value() == "secret"
        assert settings.sender == "Springfield High <noreply@example.com>"


class TestSettings:
    """Tests for the main Settings class."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.debug is True
        assert settings.is_development is True
        assert settings.is_production is False
        assert isinstance(settings.rules, RuleSettings)
        assert isinstance(settings.smtp, SMTPSettings)

    def test_production_requires_debug_off(self) -> None:
        """Test that production with debug enabled is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="production", debug=True)

    def test_production_settings(self) -> None:
        """Test a valid production configuration."""
        settings = Settings(
            _env_file=None, environment="production", debug=False, log_level="INFO"
        )

        assert settings.is_production is True

    def test_get_settings_is_cached(self) -> None:
        """Test that get_settings returns the same instance until cleared."""
        clear_settings_cache()

        first = get_settings()
        second = get_settings()
        clear_settings_cache()
        third = get_settings()

        assert first is second
        assert first is not third
        clear_settings_cache()
