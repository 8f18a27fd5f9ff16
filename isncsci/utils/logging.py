"""
Structured Logging Configuration

One handler set on the ``isncsci`` package logger; modules log through
``get_logger(__name__)`` and propagate to it.
"""
import logging
import sys
from typing import Optional, TextIO
from datetime import datetime, timezone

from isncsci.config import settings

PACKAGE_LOGGER = "isncsci"


class StructuredFormatter(logging.Formatter):
    """``[timestamp] LEVEL [logger] message`` with optional level colours."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_message = (
            f"[{timestamp}] "
            f"{record.levelname:8} "
            f"[{record.name}] "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"

        color = self.COLORS.get(record.levelname) if self.use_color else None
        if color:
            return f"{color}{log_message}{self.RESET}"
        return log_message


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the ``isncsci`` package logger.

    Args:
        level: Logging level name; defaults to ``settings.log_level``.
        log_file: Optional file path; defaults to ``settings.log_file``.
        stream: Console stream; defaults to stdout.
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file
    stream = stream or sys.stdout

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper()))

    # Re-configuring replaces, never stacks, handlers
    package_logger.handlers.clear()

    # Colours only on a terminal
    use_color = settings.log_color and hasattr(stream, "isatty") and stream.isatty()
    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(StructuredFormatter(use_color=use_color))
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter(use_color=False))
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, typically ``get_logger(__name__)``."""
    return logging.getLogger(name)


# Initialize logging on module import
setup_logging()
