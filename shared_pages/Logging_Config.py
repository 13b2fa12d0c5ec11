"""
Logging configuration for the shared_pages application.

Everything goes through loguru. Standard library ``logging`` records (from
Textual, asyncio and friends) are forwarded into loguru so there is one set
of sinks. Nothing is written to stderr while the TUI owns the terminal.
"""

import inspect
import logging
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import AppSettings, get_log_file_path


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller that issued the logged message
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_application_logging(settings: AppSettings, log_file: Optional[Path] = None) -> Optional[Path]:
    """
    Configure loguru sinks for the application.

    Args:
        settings: Loaded application settings
        log_file: Overrides the configured log file location

    Returns:
        The log file path in use, or None when file logging is disabled
    """
    logger.remove()

    log_level = settings.logging.log_level.upper()
    log_path: Optional[Path] = None

    if settings.logging.log_to_file:
        log_path = log_file or get_log_file_path(settings)
        logger.add(
            log_path,
            level=log_level,
            rotation="5 MB",
            retention=3,
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger.info(f"Logging configured (level={log_level}, file={log_path})")
    return log_path
