"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - UserModel, CourseModel, SessionModel: Domain tables
  - session_crud: CRUD singleton with the typed insert outcome

Dependencies: sqlalchemy, stats_service.configs
System role: Database adapter providing persistent storage for study sessions
"""

from stats_service.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from stats_service.boundary.db.connection import (
    dispose_async_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from stats_service.boundary.db.models import CourseModel, SessionModel, UserModel
from stats_service.boundary.db.CRUD import (
    BaseCRUD,
    InsertResult,
    InsertStatus,
    SessionCRUD,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "UUIDMixin",
    # Connection
    "dispose_async_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CourseModel",
    "SessionModel",
    "UserModel",
    # CRUD
    "BaseCRUD",
    "InsertResult",
    "InsertStatus",
    "SessionCRUD",
    "session_crud",
]
