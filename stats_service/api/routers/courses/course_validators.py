"""
Course request validators.

Each validator is a FastAPI dependency checking one input surface (header,
path parameters). Routes list them before the handler runs, so a failure in
any of them raises RequestValidationError and the handler body never
executes. The body surface is checked by CreateSessionRequest. Every id must
be a hyphenated UUID string.

Dependencies: fastapi, stats_service.models
System role: Validation chain for course/session routes
"""

from typing import NamedTuple
from uuid import UUID

from fastapi import Header, Path

from stats_service.models.common import CanonicalUUID


class SessionPath(NamedTuple):
    """Validated path parameters of a single-session route."""

    course_id: UUID
    session_id: UUID


def require_user_id(user_id: CanonicalUUID = Header(..., alias="userId")) -> UUID:
    """
    Validate the caller-supplied ``userId`` header.

    Args:
        user_id: Header value parsed as UUID

    Returns:
        UUID: Caller's user id
    """
    return user_id


def require_course_id(course_id: CanonicalUUID = Path(..., alias="courseId")) -> UUID:
    """Validate the ``courseId`` path parameter."""
    return course_id


def require_session_path(
    course_id: CanonicalUUID = Path(..., alias="courseId"),
    session_id: CanonicalUUID = Path(..., alias="sessionId"),
) -> SessionPath:
    """Validate ``courseId`` and ``sessionId`` path parameters together."""
    return SessionPath(course_id=course_id, session_id=session_id)
