"""
Course error handling utilities.

Provides a decorator for consistent error handling across study session
endpoints: domain exceptions become HTTPExceptions with fixed messages.
Anything else propagates untouched to the application-level handler.

Dependencies: fastapi, stats_service.core.exceptions
System role: Domain error to HTTP status mapping
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from stats_service.core.exceptions import SessionAlreadyExistsError, SessionNotFoundError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_session_errors(func: F) -> F:
    """
    Decorator to handle session errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (session_id)
    - Mapping specific exceptions to HTTP status codes
    - Leaving unclassified failures to the application-level handler,
      which logs them once
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except SessionNotFoundError as e:
            logger.warning("Session not found", extra=e.details)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except SessionAlreadyExistsError as e:
            logger.warning("Duplicate session id", extra=e.details)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return wrapper  # type: ignore
