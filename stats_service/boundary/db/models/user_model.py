"""
User ORM model.

Dependencies: sqlalchemy, stats_service.boundary.db.base
System role: Owner reference for recorded study sessions
"""

from sqlalchemy.orm import relationship

from stats_service.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class UserModel(Base, UUIDMixin, CreatedAtMixin):
    """
    User ORM model.

    Users are provisioned outside this service; sessions only reference
    them through a foreign key.

    Attributes:
        id: UUID primary key
        created_at: Creation timestamp (UTC)
        sessions: Study sessions recorded for this user
    """

    __tablename__ = "users"

    sessions = relationship("SessionModel", back_populates="user")
