"""Service orchestrators."""

from .session_stats_service import SessionStatsService

__all__ = ["SessionStatsService"]
