"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from stats_service.boundary.db.CRUD import session_crud

    result = await session_crud.insert(db, session_id=..., ...)
"""

from stats_service.boundary.db.CRUD.base_crud import BaseCRUD
from stats_service.boundary.db.CRUD.session_crud import (
    InsertResult,
    InsertStatus,
    SessionCRUD,
    session_crud,
)

__all__ = [
    "BaseCRUD",
    "InsertResult",
    "InsertStatus",
    "SessionCRUD",
    "session_crud",
]
