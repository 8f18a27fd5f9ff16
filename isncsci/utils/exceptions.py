"""
Custom Exception Hierarchy

Every error raised by the totals layer is an IsncsciError carrying a
machine-readable code and structured details.
"""
from typing import Optional, Dict, Any


class IsncsciError(Exception):
    """Base exception for all ISNCSCI totals errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for report payloads."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class InvalidArgumentError(IsncsciError, ValueError):
    """A required argument was missing, empty or None."""

    def __init__(
        self,
        message: str,
        operation: str = "unknown",
        argument: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INVALID_ARGUMENT",
            details={"operation": operation, "argument": argument, **(details or {})}
        )
        self.operation = operation
        self.argument = argument


class UnknownLevelError(IsncsciError, LookupError):
    """A level name is not part of the canonical ISNCSCI level table."""

    def __init__(
        self,
        level_name: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"Unknown ISNCSCI level '{level_name}'",
            code="UNKNOWN_LEVEL",
            details={"level_name": level_name, **(details or {})}
        )
        self.level_name = level_name
