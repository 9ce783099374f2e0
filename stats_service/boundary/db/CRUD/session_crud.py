"""
Session CRUD operations.

Insert, aggregate and point-lookup queries for SessionModel. The insert
reports its outcome as an InsertResult so callers can tell a duplicate
session id apart from every other store failure without inspecting
driver exceptions themselves.

Dependencies: sqlalchemy, stats_service.boundary.db.models
System role: Session persistence operations
"""

import enum
import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import Row, and_, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stats_service.boundary.db.CRUD.base_crud import BaseCRUD
from stats_service.boundary.db.models.session_model import SessionModel

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_ERRORS = {"SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE"}


class InsertStatus(str, enum.Enum):
    """Outcome of a single-row insert."""

    OK = "ok"
    DUPLICATE_KEY = "duplicate_key"
    FAILED = "failed"


@dataclass(frozen=True)
class InsertResult:
    """
    Result of SessionCRUD.insert.

    Attributes:
        status: Outcome category
        instance: Inserted row when status is OK
        cause: Original exception for DUPLICATE_KEY and FAILED
    """

    status: InsertStatus
    instance: SessionModel | None = None
    cause: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status is InsertStatus.OK


def is_duplicate_key(error: IntegrityError) -> bool:
    """
    Check whether an IntegrityError is a unique/primary-key violation.

    asyncpg and psycopg expose the SQLSTATE on the wrapped DBAPI error;
    sqlite3 exposes a symbolic error name instead.

    Args:
        error: IntegrityError raised by SQLAlchemy

    Returns:
        bool: True for unique violations only
    """
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code is not None:
        return code == UNIQUE_VIOLATION

    sqlite_name = getattr(orig, "sqlite_errorname", None)
    if sqlite_name is not None:
        return sqlite_name in SQLITE_UNIQUE_ERRORS
    return str(orig).startswith("UNIQUE constraint failed")


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with the insert-outcome wrapper, the per user/course
    aggregate and the course-scoped point lookup.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def insert(self, session: AsyncSession, **kwargs) -> InsertResult:
        """
        Insert one session row and classify the outcome.

        The insert is attempted exactly once. On failure the transaction is
        left for the caller to roll back.

        Args:
            session: Async database session
            **kwargs: SessionModel field values

        Returns:
            InsertResult: OK with the instance, DUPLICATE_KEY, or FAILED with the cause
        """
        try:
            instance = await self.create(session, **kwargs)
        except IntegrityError as e:
            if is_duplicate_key(e):
                return InsertResult(InsertStatus.DUPLICATE_KEY, cause=e)
            return InsertResult(InsertStatus.FAILED, cause=e)
        except SQLAlchemyError as e:
            return InsertResult(InsertStatus.FAILED, cause=e)
        return InsertResult(InsertStatus.OK, instance=instance)

    async def get_course_totals(
        self,
        session: AsyncSession,
        user_id: UUID,
        course_id: UUID,
    ) -> Row | None:
        """
        Aggregate a user's sessions within one course.

        Args:
            session: Async database session
            user_id: Owning user UUID
            course_id: Course UUID

        Returns:
            Row with total_modules_studied (sum), average_score (avg) and
            time_studied (sum); aggregates are NULL when nothing matches
        """
        stmt = select(
            func.sum(SessionModel.total_modules_studied).label("total_modules_studied"),
            func.avg(SessionModel.average_score).label("average_score"),
            func.sum(SessionModel.time_studied).label("time_studied"),
        ).where(
            and_(
                SessionModel.user_id == user_id,
                SessionModel.course_id == course_id,
            )
        )
        result = await session.execute(stmt)
        return result.one_or_none()

    async def get_for_course(
        self,
        session: AsyncSession,
        course_id: UUID,
        session_id: UUID,
    ) -> SessionModel | None:
        """
        Retrieve a session by id, scoped to its course.

        Args:
            session: Async database session
            course_id: Course UUID
            session_id: Session UUID

        Returns:
            SessionModel if found, None otherwise
        """
        stmt = select(SessionModel).where(
            and_(
                SessionModel.course_id == course_id,
                SessionModel.session_id == session_id,
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


session_crud = SessionCRUD()
