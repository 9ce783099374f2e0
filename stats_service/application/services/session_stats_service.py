"""
Session stats service orchestrator.

Coordinates the three study-session use cases: record a session, read one
session back, and total a user's sessions within a course.

Dependencies: stats_service.boundary.db.CRUD, stats_service.core.exceptions
System role: Session statistics use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from stats_service.boundary.db.CRUD.session_crud import InsertStatus, session_crud
from stats_service.core.exceptions import SessionAlreadyExistsError, SessionNotFoundError
from stats_service.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class SessionStatsService:
    """Session statistics service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_session(
        self,
        user_id: UUID,
        course_id: UUID,
        session_id: UUID,
        total_modules_studied: int,
        average_score: int,
        time_studied: int,
    ) -> dict:
        """
        Record one study session.

        Args:
            user_id: Caller's user UUID (from header)
            course_id: Course UUID (from path)
            session_id: Caller-generated session UUID
            total_modules_studied: Modules studied
            average_score: Average score
            time_studied: Time studied

        Returns:
            dict: The recorded measures keyed by field name

        Raises:
            SessionAlreadyExistsError: If session_id is already taken
            SQLAlchemyError: Any other store failure, unchanged
        """
        result = await session_crud.insert(
            self.db,
            session_id=session_id,
            user_id=user_id,
            course_id=course_id,
            total_modules_studied=total_modules_studied,
            average_score=average_score,
            time_studied=time_studied,
        )

        if result.status is InsertStatus.DUPLICATE_KEY:
            await self.db.rollback()
            raise SessionAlreadyExistsError(str(session_id))
        if result.status is InsertStatus.FAILED:
            await self.db.rollback()
            raise result.cause

        await self.db.commit()

        log_with_context(
            logger,
            logging.INFO,
            "Session recorded",
            session_id=session_id,
            course_id=course_id,
            user_id=user_id,
        )
        return {
            "session_id": session_id,
            "total_modules_studied": total_modules_studied,
            "average_score": average_score,
            "time_studied": time_studied,
        }

    async def get_course_totals(self, user_id: UUID, course_id: UUID) -> dict:
        """
        Total a user's sessions within a course.

        Args:
            user_id: User UUID
            course_id: Course UUID

        Returns:
            dict: total_modules_studied, average_score, time_studied; all zero
            when the user has no sessions in the course. A whole-number
            average is returned as int, otherwise as float.
        """
        row = await session_crud.get_course_totals(self.db, user_id, course_id)

        if row is None:
            return {"total_modules_studied": 0, "average_score": 0, "time_studied": 0}

        totals = row._mapping
        average = float(totals["average_score"] or 0)
        return {
            "total_modules_studied": int(totals["total_modules_studied"] or 0),
            "average_score": int(average) if average.is_integer() else average,
            "time_studied": int(totals["time_studied"] or 0),
        }

    async def get_session(self, course_id: UUID, session_id: UUID) -> dict:
        """
        Get one session within a course.

        Args:
            course_id: Course UUID
            session_id: Session UUID

        Returns:
            dict: session_id and the three measures

        Raises:
            SessionNotFoundError: If no session matches both ids
        """
        session = await session_crud.get_for_course(self.db, course_id, session_id)

        if session is None:
            raise SessionNotFoundError(str(session_id), {"course_id": str(course_id)})

        return {
            "session_id": session.session_id,
            "total_modules_studied": session.total_modules_studied,
            "average_score": session.average_score,
            "time_studied": session.time_studied,
        }
