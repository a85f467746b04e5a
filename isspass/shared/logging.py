"""
Logging Configuration - Shared Layer

Wires structlog on top of the standard logging module so that every layer
emits event-style records ("ip_resolver.request", "passes.lookup_failed")
through the same handlers.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from isspass.shared.consts import EnumEnvironment

# Processors shared by structlog loggers and foreign (stdlib) records
_SHARED_PROCESSORS: List[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    # stderr keeps stdout free for the CLI's pass listing
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    return handlers


def _build_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure structlog and the standard logging root logger.

    Should be called at startup, before settings are loaded, so that the
    configuration phase itself can log. Values missing from the arguments
    fall back to LOG_LEVEL / LOG_FILE_PATH environment variables.

    Args:
        level: Optional override for the log level.
        file_path: Optional path of an additional log file.
        environment: Application environment; production renders JSON.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_build_renderer(environment),
        foreign_pre_chain=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )

    handlers = _build_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.debug(f"Logging configured with level: {log_level}")
    if log_file:
        logging.debug(f"Logging to file: {log_file}")


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: Object exposing ``logging.level``, ``logging.file_path``
            and ``environment`` (usually ``AppSettings``).
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)

        configure_logging(
            level=log_level,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
