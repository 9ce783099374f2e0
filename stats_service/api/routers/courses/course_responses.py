"""
Course response mapping utilities.

Transforms service-layer dictionaries into Pydantic response models.

Dependencies: stats_service.models.session
System role: Course response transformation
"""

from typing import Any

from stats_service.models.session import CourseTotalsResponse, SessionResponse


def map_session_to_response(session_data: dict[str, Any]) -> SessionResponse:
    """
    Transform session data dictionary into SessionResponse.

    Args:
        session_data: Dictionary with session_id and the three measures

    Returns:
        SessionResponse: Pydantic model for API response
    """
    return SessionResponse(**session_data)


def map_totals_to_response(totals: dict[str, Any]) -> CourseTotalsResponse:
    """Transform aggregated totals into CourseTotalsResponse."""
    return CourseTotalsResponse(**totals)
