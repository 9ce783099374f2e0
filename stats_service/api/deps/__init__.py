"""FastAPI dependency factories."""

from .dependencies import get_session_stats_service

__all__ = ["get_session_stats_service"]
