"""
Core infrastructure for the travel coordination backend.
Provides database access, logging, exceptions and store-call guarding.
"""

from .db import Base, get_db, get_engine, get_session_factory
from .exceptions import (
    ErrorCode,
    TravelCoordinationException,
    ValidationError,
    NotFoundError,
    InvalidStatusTransitionError,
    NetworkError,
    RequestTimeoutError,
)
from .store_guard import run_store_call, store_call

__all__ = [
    "Base",
    "get_db",
    "get_engine",
    "get_session_factory",
    "ErrorCode",
    "TravelCoordinationException",
    "ValidationError",
    "NotFoundError",
    "InvalidStatusTransitionError",
    "NetworkError",
    "RequestTimeoutError",
    "run_store_call",
    "store_call",
]
