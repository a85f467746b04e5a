"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used across every layer. Must not
depend on the infrastructure or presentation layers.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
