"""
Course ORM model.

Dependencies: sqlalchemy, stats_service.boundary.db.base
System role: Course reference for recorded study sessions
"""

from sqlalchemy.orm import relationship

from stats_service.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class CourseModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Course ORM model.

    Attributes:
        id: UUID primary key
        created_at: Creation timestamp (UTC)
        sessions: Study sessions recorded against this course
    """

    __tablename__ = "courses"

    sessions = relationship("SessionModel", back_populates="course")
