"""
Logging package for ``edi_parser``.

Use ``get_logger(__name__)`` in modules to share the project handlers.
"""

from .logger import (
    configure_logging,
    get_logger,
    list_active_loggers,
    log_debug,
    log_error,
    log_info,
    log_warning,
    reset_logging,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "list_active_loggers",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "reset_logging",
]
