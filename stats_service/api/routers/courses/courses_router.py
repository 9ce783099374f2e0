"""
Course study session API endpoints.

Routes:
- POST /courses/{courseId} - Record a study session
- GET /courses/{courseId} - Aggregate the caller's sessions in a course
- GET /courses/{courseId}/sessions/{sessionId} - Get one session

Every route requires a ``userId`` UUID header.

Dependencies: stats_service.application.services, stats_service.models
System role: Study session statistics HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from stats_service.api.deps.dependencies import get_session_stats_service
from stats_service.application.services import SessionStatsService
from stats_service.models.common import ErrorResponse
from stats_service.models.session import (
    CourseTotalsResponse,
    CreateSessionRequest,
    SessionResponse,
)

from .course_error_handling import handle_session_errors
from .course_responses import map_session_to_response, map_totals_to_response
from .course_validators import (
    SessionPath,
    require_course_id,
    require_session_path,
    require_user_id,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/courses",
    tags=["courses"],
    responses={400: {"model": ErrorResponse}},
)


@router.post("/{courseId}", response_model=SessionResponse)
@handle_session_errors
async def create_session(
    request: CreateSessionRequest,
    user_id: UUID = Depends(require_user_id),
    course_id: UUID = Depends(require_course_id),
    service: SessionStatsService = Depends(get_session_stats_service),
) -> SessionResponse:
    """
    Record a study session for the caller in a course.

    Args:
        request: Session id and the three measures
        user_id: Validated ``userId`` header
        course_id: Validated ``courseId`` path parameter
        service: Injected SessionStatsService

    Returns:
        SessionResponse: The validated payload, echoed

    Raises:
        HTTPException(400): Invalid input or duplicate session id
    """
    logger.info(
        "Recording session",
        extra={"course_id": str(course_id), "session_id": str(request.session_id)},
    )

    session_data = await service.create_session(
        user_id=user_id,
        course_id=course_id,
        session_id=request.session_id,
        total_modules_studied=request.total_modules_studied,
        average_score=request.average_score,
        time_studied=request.time_studied,
    )
    return map_session_to_response(session_data)


@router.get("/{courseId}", response_model=CourseTotalsResponse)
@handle_session_errors
async def get_course_totals(
    user_id: UUID = Depends(require_user_id),
    course_id: UUID = Depends(require_course_id),
    service: SessionStatsService = Depends(get_session_stats_service),
) -> CourseTotalsResponse:
    """
    Aggregate the caller's sessions within a course.

    Sums modules and time studied and averages the score. A course with no
    sessions for the caller yields zeros.

    Raises:
        HTTPException(400): Invalid ``userId`` header or ``courseId``
    """
    totals = await service.get_course_totals(user_id=user_id, course_id=course_id)
    return map_totals_to_response(totals)


@router.get(
    "/{courseId}/sessions/{sessionId}",
    response_model=SessionResponse,
    responses={404: {"model": ErrorResponse}},
    dependencies=[Depends(require_user_id)],
)
@handle_session_errors
async def get_session(
    path: SessionPath = Depends(require_session_path),
    service: SessionStatsService = Depends(get_session_stats_service),
) -> SessionResponse:
    """
    Get one session within a course.

    Raises:
        HTTPException(400): Invalid header or path UUIDs
        HTTPException(404): Session not found
    """
    session_data = await service.get_session(
        course_id=path.course_id,
        session_id=path.session_id,
    )
    return map_session_to_response(session_data)
