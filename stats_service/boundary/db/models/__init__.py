"""ORM models. Importing this package registers every table with Base.metadata."""

from stats_service.boundary.db.models.course_model import CourseModel
from stats_service.boundary.db.models.session_model import SessionModel
from stats_service.boundary.db.models.user_model import UserModel

__all__ = ["CourseModel", "SessionModel", "UserModel"]
