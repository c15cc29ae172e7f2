# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

Settings are loaded from environment variables with sensible defaults.
The Settings class is the main entry point and aggregates all subsettings.
A cached instance is provided via get_settings(). Callers normally pass
``settings.rules`` and ``settings.smtp`` into the controller and senders;
a CourseController built without rules loads RuleSettings from the
environment itself.

Example:
    >>> from schoolcore.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> settings.rules.passing_percentage
    60.0
"""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuleSettings(BaseSettings):
    """Tunable parts of the domain rules.

    The entity invariants themselves (title and description lengths,
    grade range, one submission per student) are fixed; only policy
    choices that differ between schools live here.

    Attributes:
        passing_percentage: Minimum percentage score counted as passing.
        admin_courses_start_active: Courses created by an admin skip the
            draft status and start active.
    """

    model_config = SettingsConfigDict(
        env_prefix="RULES_",
        extra="ignore",
    )

    passing_percentage: float = Field(default=60.0, ge=0.0, le=100.0)
    admin_courses_start_active: bool = True


class SMTPSettings(BaseSettings):
    """SMTP configuration for the email notification service.

    Attributes:
        host: SMTP server hostname.
        port: SMTP server port.
        username: SMTP authentication username.
        password: SMTP authentication password.
        use_tls: Use STARTTLS.
        from_email: Sender email address.
        from_name: Sender display name.
        timeout: Connection timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="SMTP_",
        extra="ignore",
    )

    host: str | None = None
    port: int = 587
    username: str | None = None
    password: SecretStr | None = None
    use_tls: bool = True
    from_email: str | None = None
    from_name: str = "SchoolCore"
    timeout: float = 30.0

    @property
    def is_configured(self) -> bool:
        """Check that every value needed to send mail is present."""
        return all([self.host, self.username, self.password, self.from_email])

    @property
    def sender(self) -> str:
        """Build the From header value."""
        return f"{self.from_name} <{self.from_email}>"


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        rules: Domain rule settings.
        smtp: SMTP settings for email notifications.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    rules: RuleSettings = Field(default_factory=RuleSettings)
    smtp: SMTPSettings = Field(default_factory=SMTPSettings)

    @model_validator(mode="after")
    def validate_production_settings(self) -> Self:
        """Validate that production settings are properly configured.

        Raises:
            ValueError: If running in production with debug enabled.
        """
        if self.environment == "production" and self.debug:
            raise ValueError(
                "Debug mode must be disabled in production. "
                "Set DEBUG=false environment variable."
            )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()
