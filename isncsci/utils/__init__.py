"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    IsncsciError,
    InvalidArgumentError,
    UnknownLevelError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "IsncsciError",
    "InvalidArgumentError",
    "UnknownLevelError",
]
