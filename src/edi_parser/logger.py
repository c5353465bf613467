"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``edi_parser.logging`` directly:
    from edi_parser.logging import get_logger
"""

from edi_parser.logging import get_logger, log_debug, log_error, log_info, log_warning

__all__ = [
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
]
