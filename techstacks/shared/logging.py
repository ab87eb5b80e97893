"""
Logging Configuration - Shared Layer

Structured logging for the web host: structlog renders both its own events
and records emitted through the standard library (uvicorn, SQLAlchemy, httpx).
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from techstacks.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that are chatty at INFO level.
QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore")


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """
    Read the bootstrap logging configuration from the environment.

    Used before the runtime settings have been loaded.
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
    }


def _build_renderer(environment: str, format_string: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    # A plain format string asks for uncoloured console output.
    colors = format_string == DEFAULT_LOG_FORMAT and sys.stdout.isatty()
    return structlog.dev.ConsoleRenderer(colors=colors)


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure stdlib logging and structlog.

    Call once at process start, then again through
    ``update_logging_from_settings`` once the runtime settings are known.

    Args:
        level: Optional override for the log level.
        format_string: Optional override for the console format.
        file_path: Optional log file, in addition to stdout.
        environment: Application environment (development, production, etc.)
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or "INFO"
    log_format = format_string or env_config["format"] or DEFAULT_LOG_FORMAT
    log_file = file_path or env_config["file_path"]

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_build_renderer(environment, log_format),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    get_logger(__name__).debug(
        "logging.configured", level=log_level, file_path=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the runtime settings.

    Args:
        settings: Object exposing ``logging`` (level, format, file_path)
            and ``environment``.
    """
    log_level = getattr(settings.logging.level, "value", settings.logging.level)
    environment = getattr(settings.environment, "value", settings.environment)

    configure_logging(
        level=log_level,
        format_string=settings.logging.format,
        file_path=settings.logging.file_path,
        environment=environment,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
