"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (e.g., environment names, log levels)
- Centralizing date formatting used by JSON and XML serialisers
- Configuring structured logging

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import DateHandler, EnumEnvironment, EnumLogLevel
from .dates import as_utc, format_datetime, utcnow
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DateHandler",
    "EnumEnvironment",
    "EnumLogLevel",
    "as_utc",
    "format_datetime",
    "utcnow",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
