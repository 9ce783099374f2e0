"""
Session domain models and schemas.

Request/response schemas for study session operations. Wire names are
camelCase; Python attributes are snake_case.

Dependencies: pydantic
System role: Session API contracts
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from stats_service.models.common import CanonicalUUID

# Measures are stored in 32-bit INTEGER columns
MAX_MEASURE = 2_147_483_647


class CamelModel(BaseModel):
    """Base schema serialising to camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateSessionRequest(CamelModel):
    """
    Request schema for recording a study session.

    Measures must be JSON integers between 1 and MAX_MEASURE; strings,
    booleans and floats are rejected rather than coerced.
    """

    session_id: CanonicalUUID = Field(description="Caller-generated session id")
    total_modules_studied: int = Field(
        gt=0, le=MAX_MEASURE, strict=True, description="Modules studied"
    )
    average_score: int = Field(gt=0, le=MAX_MEASURE, strict=True, description="Average score")
    time_studied: int = Field(gt=0, le=MAX_MEASURE, strict=True, description="Time studied")


class SessionResponse(CamelModel):
    """Response schema for a single session."""

    session_id: CanonicalUUID
    total_modules_studied: int
    average_score: int
    time_studied: int


class CourseTotalsResponse(CamelModel):
    """Aggregated measures for one user within one course."""

    total_modules_studied: int = 0
    average_score: int | float = Field(
        default=0, description="Mean score; an integer when the mean is whole"
    )
    time_studied: int = 0
