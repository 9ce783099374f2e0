"""
Common models and field types.

Dependencies: pydantic
System role: Common API structures shared by requests and responses
"""

import re
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, Field

_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def require_canonical_uuid(value: Any) -> Any:
    """
    Reject UUID strings not in 8-4-4-4-12 hyphenated form.

    pydantic's UUID type also accepts undashed hex, braces and ``urn:uuid:``
    prefixes; incoming ids must be in the hyphenated form so they are echoed
    back unchanged.
    """
    if isinstance(value, str) and not _CANONICAL_UUID.fullmatch(value):
        raise ValueError("Invalid UUID, expected xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx")
    return value


CanonicalUUID = Annotated[UUID, BeforeValidator(require_canonical_uuid)]


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx and 5xx response."""

    error: str = Field(description="Error message")
