"""Logging configuration for Zoning Lookup using loguru.

Application code logs through loguru. Libraries that use the standard
``logging`` module (uvicorn, httpx) are routed into the same sinks via
``InterceptHandler`` so server access and error logs reach the log file.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from zoning_lookup.config import Settings

# Stdlib loggers that install their own handlers and must propagate to root instead
BRIDGED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx", "httpcore")


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging-module frames so loguru reports the original caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def intercept_stdlib_logging(level: str) -> None:
    """Replace root and library handlers with a single loguru bridge."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name in BRIDGED_LOGGERS:
        bridged = logging.getLogger(name)
        bridged.handlers = []
        bridged.propagate = True
        bridged.setLevel(level)


def setup_logging(settings: Settings) -> None:
    """
    Configure loguru sinks and bridge stdlib logging into them.

    Args:
        settings: Application settings containing log level and file path.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )

    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        settings.log_file,
        level=settings.log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )

    intercept_stdlib_logging(settings.log_level.upper())

    logger.info("Logging configured: level={}, file={}", settings.log_level, settings.log_file)
