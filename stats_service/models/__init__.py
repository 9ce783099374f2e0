"""API request/response schemas."""

from stats_service.models.common import ErrorResponse
from stats_service.models.session import (
    CourseTotalsResponse,
    CreateSessionRequest,
    SessionResponse,
)

__all__ = [
    "CourseTotalsResponse",
    "CreateSessionRequest",
    "ErrorResponse",
    "SessionResponse",
]
