"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from loguru import logger


class DrowordException(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DrowordException):
    """Data validation errors."""
    pass


class WordNotFoundError(DrowordException):
    """Raised when a word cannot be located in the store."""
    pass


class TagNotFoundError(DrowordException):
    """Raised when a tag cannot be located in the store."""
    pass


class PracticeSessionError(DrowordException):
    """Practice session related errors."""
    pass


class SessionCompleteError(PracticeSessionError):
    """Raised when a finished session queue is asked for more cards."""
    pass


def handle_database_error(error: Exception) -> HTTPException:
    """Handle database errors and return appropriate HTTP response."""
    logger.error(f"Database error: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database operation failed. Please try again later."
    )


def handle_validation_error(error: ValidationError) -> HTTPException:
    """Handle validation errors."""
    logger.warning(f"Validation error: {error.message}")
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={
            "message": error.message,
            "details": error.details
        }
    )


def handle_not_found_error(error: DrowordException) -> HTTPException:
    """Handle lookups of missing words or tags."""
    logger.warning(f"Not found: {error.message}")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=error.message
    )


def handle_session_error(error: PracticeSessionError) -> HTTPException:
    """Handle practice session errors."""
    logger.warning(f"Session error: {error.message}")
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={
            "message": error.message,
            "details": error.details
        }
    )
