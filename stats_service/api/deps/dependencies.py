"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: stats_service.application, stats_service.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from stats_service.application.services import SessionStatsService
from stats_service.boundary.db import get_async_db


def get_session_stats_service(
    db: AsyncSession = Depends(get_async_db),
) -> SessionStatsService:
    """
    Get session stats service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionStatsService: Service bound to the request's database session
    """
    return SessionStatsService(db=db)
