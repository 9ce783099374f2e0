"""
Session ORM model.

Represents one recorded study interval for a user within a course.

Dependencies: sqlalchemy, stats_service.boundary.db.base
System role: Persistence of per-session study measures
"""

import uuid

from sqlalchemy import ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stats_service.boundary.db.base import Base, CreatedAtMixin


class SessionModel(Base, CreatedAtMixin):
    """
    Session ORM model holding the three study measures.

    The session id is supplied by the caller and is the primary key, so the
    database rejects a second insert with the same id. Rows are written once
    and never updated.

    Attributes:
        session_id: Caller-supplied UUID primary key
        user_id: Owning user (FK users.id)
        course_id: Owning course (FK courses.id)
        total_modules_studied: Modules covered during the session
        average_score: Average score achieved
        time_studied: Time spent studying
        created_at: Insertion timestamp (UTC)
    """

    __tablename__ = "sessions"

    session_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("courses.id"),
        nullable=False,
        index=True,
    )
    total_modules_studied: Mapped[int] = mapped_column(Integer, nullable=False)
    average_score: Mapped[int] = mapped_column(Integer, nullable=False)
    time_studied: Mapped[int] = mapped_column(Integer, nullable=False)

    user = relationship("UserModel", back_populates="sessions")
    course = relationship("CourseModel", back_populates="sessions")
