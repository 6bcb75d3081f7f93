"""
Custom exceptions for the travel coordination backend.

Services raise these; the API layer maps them to HTTP responses.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Input errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"

    # Backing store errors
    NETWORK_ERROR = "NETWORK_ERROR"
    REQUEST_TIMEOUT = "REQUEST_TIMEOUT"

    # Generic errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class TravelCoordinationException(Exception):
    """Base exception for the travel coordination backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class ValidationError(TravelCoordinationException):
    """Raised when required input is missing or invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            details=details,
            status_code=400
        )


class NotFoundError(TravelCoordinationException):
    """Raised when a referenced record does not exist."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} not found",
            error_code=ErrorCode.NOT_FOUND,
            details={"resource": resource, "id": resource_id},
            status_code=404
        )
        self.resource = resource
        self.resource_id = resource_id


class InvalidStatusTransitionError(TravelCoordinationException):
    """Raised when a travel status change is not allowed."""

    def __init__(self, current: str, target: str):
        super().__init__(
            message=f"Cannot move group from '{current}' to '{target}'",
            error_code=ErrorCode.INVALID_STATUS_TRANSITION,
            details={"current_status": current, "target_status": target},
            status_code=409
        )


class NetworkError(TravelCoordinationException):
    """Raised when the backing store cannot be reached."""

    def __init__(self, operation: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Backing store unavailable during '{operation}'",
            error_code=ErrorCode.NETWORK_ERROR,
            details=details or {"operation": operation},
            status_code=503
        )


class RequestTimeoutError(TravelCoordinationException):
    """Raised when a store call exceeds the configured timeout."""

    def __init__(self, operation: str, timeout_seconds: float):
        super().__init__(
            message=f"'{operation}' timed out after {timeout_seconds} seconds",
            error_code=ErrorCode.REQUEST_TIMEOUT,
            details={"operation": operation, "timeout_seconds": timeout_seconds},
            status_code=504
        )
