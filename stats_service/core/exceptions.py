"""
Exception hierarchy for the study stats service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StatsServiceException(Exception):
    """Base exception for all study stats service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class SessionAlreadyExistsError(StatsServiceException):
    """Raised when a session id collides with an existing row."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize duplicate session error.

        Args:
            session_id: ID that was already taken
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        super().__init__("Session already exists", details)


class SessionNotFoundError(StatsServiceException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        super().__init__("Session not found", details)
