"""
loguru setup shared by the skillpack CLI and HTTP server.

Parser modules call ``get_logger(__name__)`` at import time and log freely;
nothing is emitted until ``setup_logging`` installs the sinks.
"""
import sys
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger

PACKAGE = "skillpack"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level:8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:8} | {extra[name]}:{function}:{line} | {message}"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: Optional[TextIO] = None,
) -> None:
    """
    Replace any installed sinks with the skillpack console sink and, optionally, a log file.

    Args:
        level: Console threshold, any loguru level name (case-insensitive)
        log_file: Path of a rotating log file that records everything from DEBUG up
        console: Stream for console output; defaults to the current ``sys.stderr``
            so ``parse --json`` output on stdout stays machine-readable
    """
    logger.remove()
    logger.configure(extra={"name": PACKAGE})

    logger.add(
        console or sys.stderr,
        level=level.upper(),
        format=CONSOLE_FORMAT,
        colorize=console is None,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )


def get_logger(name: str):
    """Logger bound to ``name`` with the ``skillpack.`` prefix dropped (``skills.loader``)."""
    prefix = PACKAGE + "."
    if name.startswith(prefix):
        name = name[len(prefix):]
    return logger.bind(name=name)
