"""Custom exceptions for Video Grid with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    VIDEO_GRID_ERROR = "VIDEO_GRID_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Layout errors
    LAYOUT_ERROR = "LAYOUT_ERROR"
    LAYOUT_STATE_UNAVAILABLE = "LAYOUT_STATE_UNAVAILABLE"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"


class VideoGridException(Exception):
    """Base exception for video grid errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIDEO_GRID_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize video grid exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class LayoutException(VideoGridException):
    """Layout state errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LAYOUT_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class LayoutStateUnavailableException(LayoutException):
    """Layout state manager has not been initialized."""

    def __init__(self, message: str = "Layout state is not available", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.LAYOUT_STATE_UNAVAILABLE,
            status_code=503,
            details=details,
        )


class ConfigurationException(VideoGridException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
