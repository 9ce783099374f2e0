"""
Courses router package.

Exports the router for study session endpoints nested under courses.
"""

from .courses_router import router

__all__ = ["router"]
