"""
Centralized logging configuration for the EDI parser.

Key behaviors
-------------
* Single entry point via ``get_logger`` so every module shares one handler set.
* Master log file (default: ``logs/edi_parser.log``), optionally one extra
  file per module when ``logging.per_module`` is enabled.
* Console output goes through ``rich.logging.RichHandler``; the ``debug``
  flag (config file or ``--verbose`` on the CLI) lowers it to DEBUG.
* Optional size-based rotation controlled by ``config/edi_parser.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from rich.logging import RichHandler

from edi_parser.config import get_config

BASE_LOGGER_NAME = "edi_parser"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_rotate_logs: bool = False
_per_module: bool = False


def _resolve_log_dir() -> Path:
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _file_handler(path: Path, level: int) -> logging.Handler:
    if _rotate_logs:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger(debug: Optional[bool] = None) -> Logger:
    global _base_configured, _effective_level, _rotate_logs, _per_module

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _per_module = bool(cfg.logging.get("per_module", False))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    debug_enabled = bool(cfg.debug) if debug is None else debug
    _effective_level = logging.DEBUG if debug_enabled else getattr(logging, level_name, logging.INFO)

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    master_name = cfg.logging.get("file", "edi_parser.log")
    base_logger.addHandler(_file_handler(_resolve_log_dir() / master_name, _effective_level))

    console = RichHandler(show_path=False, markup=False)
    console.setLevel(logging.DEBUG if debug_enabled else logging.WARNING)
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    if any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        return

    path = _resolve_log_dir() / f"{module_name.replace('.', '_')}.log"
    handler = _file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def configure_logging(debug: Optional[bool] = None) -> Logger:
    """(Re)build the shared handlers, optionally forcing the debug flag.

    The CLI calls this once per run so ``--verbose`` wins over the config file.
    """
    known = list(_logger_cache)
    reset_logging()
    base_logger = _configure_base_logger(debug=debug)

    for name in known:
        get_logger(name)

    return base_logger


def reset_logging() -> None:
    """Close and detach every handler installed by this module."""
    global _base_configured

    for name in [BASE_LOGGER_NAME, *_logger_cache]:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    _logger_cache.clear()
    _base_configured = False


def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    Module loggers propagate to the ``edi_parser`` base logger, which owns the
    master file and the console. With ``logging.per_module: true`` each module
    also writes ``logs/<module>.log``.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name == base_logger.name:
        return base_logger

    if not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)
    logger.propagate = True
    if _per_module:
        _attach_module_handler(logger, logger_name)

    _logger_cache[logger_name] = logger
    return logger


def log_debug(message: str, *args, **kwargs) -> None:
    get_logger(BASE_LOGGER_NAME).debug(message, *args, **kwargs)


def log_info(message: str, *args, **kwargs) -> None:
    get_logger(BASE_LOGGER_NAME).info(message, *args, **kwargs)


def log_warning(message: str, *args, **kwargs) -> None:
    get_logger(BASE_LOGGER_NAME).warning(message, *args, **kwargs)


def log_error(message: str, *args, **kwargs) -> None:
    get_logger(BASE_LOGGER_NAME).error(message, *args, **kwargs)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
