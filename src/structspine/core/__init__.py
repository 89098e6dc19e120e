"""Core configuration and utilities."""

from structspine.core.config import Settings, get_settings
from structspine.core.exceptions import (
    AliasingError,
    ConfigurationError,
    CycleError,
    NotFoundError,
    StructSpineError,
    StructureError,
    ValidationError,
)
from structspine.core.logging import configure_logging

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    # Exceptions
    "StructSpineError",
    "StructureError",
    "CycleError",
    "AliasingError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
]
