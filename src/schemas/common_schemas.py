"""Response envelope schemas shared by every endpoint.

Every response body has the shape ``{"meta": {...}, "data": ...}``. Field
names are serialized in camelCase.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MetaResponse(CamelModel):
    """Response metadata.

    Attributes:
        code: HTTP status code as a string (e.g. "200").
        message: Human-readable outcome.
    """

    code: str = Field(..., description="HTTP status code as string")
    message: str = Field(..., description="Outcome message")


class PaginatedMetaResponse(MetaResponse):
    """Response metadata for paginated lists.

    Attributes:
        total: Total number of items available.
        page: Page served.
        size: Page size requested.
    """

    total: int = Field(..., description="Total items available")
    page: int = Field(..., description="Current page number")
    size: int = Field(..., description="Items per page")


class ErrorResponse(CamelModel):
    """Envelope returned for every error."""

    meta: MetaResponse
    data: None = None

    @classmethod
    def build(cls, status_code: int, message: str) -> "ErrorResponse":
        """Create an error envelope for a status code."""
        return cls(meta=MetaResponse(code=str(status_code), message=message))
