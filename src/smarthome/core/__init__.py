"""Core SmartHome utilities.

This module exports core utilities for use throughout the application.
"""

from smarthome.core.config import Settings, get_settings
from smarthome.core.exceptions import ErrorKind, NotFoundError, SmartHomeError, ValidationError
from smarthome.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "ErrorKind",
    "NotFoundError",
    "Settings",
    "SmartHomeError",
    "ValidationError",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
]
