"""
Error types and classification for the maintenance procedures.

Database failures are wrapped into `PersistenceError` at the store boundary so
the procedures can catch one family of errors at their top level and report it.
"""

import asyncio
from typing import Any, Dict, Optional

from sqlalchemy.exc import (
    SQLAlchemyError,
    IntegrityError,
    OperationalError,
    DisconnectionError,
    TimeoutError as SQLTimeoutError,
    StatementError,
    DataError,
    DatabaseError,
)

# Raised by the driver itself when a connection is refused, lost or times out
CONNECTION_ERRORS = (OSError, asyncio.TimeoutError)
STORE_ERRORS = (SQLAlchemyError,) + CONNECTION_ERRORS


class MenuMaintenanceError(Exception):
    """Base exception for the maintenance scripts."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class ConfigurationError(MenuMaintenanceError):
    """Settings are missing or invalid."""
    pass


class PersistenceError(MenuMaintenanceError):
    """A create/read/update/delete call against the menu store failed."""
    pass


class StoreConnectionError(PersistenceError):
    """The database connection was lost or could not be established."""
    pass


class ErrorClassifier:
    """Maps database errors to a log-friendly description and a retryable flag."""

    # Checked in order, most specific first
    ERROR_MAPPINGS = {
        IntegrityError: {
            'detail': 'Data integrity constraint violation',
            'retryable': False
        },
        DisconnectionError: {
            'detail': 'Database connection lost',
            'retryable': True
        },
        SQLTimeoutError: {
            'detail': 'Database operation timed out',
            'retryable': True
        },
        OperationalError: {
            'detail': 'Database operation failed',
            'retryable': True
        },
        DataError: {
            'detail': 'Invalid data format',
            'retryable': False
        },
        DatabaseError: {
            'detail': 'Database error occurred',
            'retryable': False
        },
        StatementError: {
            'detail': 'Invalid database query',
            'retryable': False
        },
        asyncio.TimeoutError: {
            'detail': 'Database operation timed out',
            'retryable': True
        },
        OSError: {
            'detail': 'Database connection failed',
            'retryable': True
        },
    }

    @classmethod
    def classify_error(cls, error: Exception) -> Dict[str, Any]:
        """
        Classify an error raised by a maintenance run.

        Args:
            error: The exception that occurred, wrapped or not

        Returns:
            Dictionary with detail, retryable flag and error type name
        """
        original = error
        if isinstance(error, MenuMaintenanceError) and error.original_error is not None:
            original = error.original_error

        for exc_type, mapping in cls.ERROR_MAPPINGS.items():
            if isinstance(original, exc_type):
                info = mapping.copy()
                break
        else:
            if isinstance(error, ConfigurationError):
                info = {'detail': 'Invalid configuration', 'retryable': False}
            else:
                info = {'detail': 'An unexpected error occurred', 'retryable': False}

        info['error_type'] = type(original).__name__
        return info

    @classmethod
    def wrap(cls, error: Exception, action: str) -> PersistenceError:
        """Wrap a SQLAlchemy or driver error raised while performing `action`."""
        message = f"{action} failed: {error}"
        if (isinstance(error, (DisconnectionError,) + CONNECTION_ERRORS)
                or getattr(error, "connection_invalidated", False)):
            return StoreConnectionError(message, original_error=error)
        return PersistenceError(message, original_error=error)


def describe_error(error: Exception) -> str:
    """One-line description used in logs and procedure results."""
    info = ErrorClassifier.classify_error(error)
    return f"{info['detail']} ({info['error_type']}): {error}"
