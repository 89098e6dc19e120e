"""StructSpine configuration.

Application settings loaded from environment variables with STRUCTSPINE_ prefix.

Example:
    >>> from structspine.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.notify_channels
    ['email', 'sms', 'slack']
"""

from __future__ import annotations

from typing import Any, Literal

import pydantic
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from structspine.core.exceptions import ConfigurationError
from structspine.models.message import Severity

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with STRUCTSPINE_ prefix.

    Example:
        >>> from structspine.core.config import Settings
        >>> s = Settings(notify_channels=["slack"])
        >>> s.notify_channels
        ['slack']
        >>> s.log_format
        'console'
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "json"] = Field(default="console", description="Log format: json or console")

    # Notifications
    notify_channels: list[str] = Field(
        default_factory=lambda: ["email", "sms", "slack"],
        min_length=1,
        description="Channels used by `structspine notify`, in firing order",
    )
    min_severity: Severity = Field(default=Severity.DEBUG, description="Lowest severity a notifier delivers")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Raises:
        ConfigurationError: An override or environment variable is invalid.

    Example:
        >>> from structspine.core.config import get_settings
        >>> s = get_settings(log_format="json")
        >>> s.log_format
        'json'
    """
    try:
        return Settings(**overrides)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"invalid settings: {e}") from e
