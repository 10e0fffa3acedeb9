"""API error body."""

from typing import Optional

from pydantic import Field, StrictStr

from .base import WireModel


class APIError(WireModel):
    """Request level failure reported by the API instead of the expected object."""

    type_: StrictStr = Field(alias="type")
    message: StrictStr
    code: Optional[StrictStr] = None
    param: Optional[StrictStr] = None
    decline_code: Optional[StrictStr] = None
    charge: Optional[StrictStr] = None
    doc_url: Optional[StrictStr] = None

    @classmethod
    def wire_name(cls) -> str:
        return "error"


class ErrorResponse(WireModel):
    error: APIError
