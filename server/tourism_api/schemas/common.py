"""Common Pydantic schemas and response helpers."""

from typing import Any, Optional
from uuid import UUID

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON while using snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatchModel(CamelModel):
    """
    Base for partial updates.

    Only declared fields are accepted; anything else in the body is dropped.
    Subclasses declare non-nullable fields with a None default, so leaving a
    field out is allowed while sending an explicit null fails validation.
    """

    model_config = ConfigDict(extra="ignore")

    def to_patch(self) -> dict[str, Any]:
        """Fields explicitly sent by the client, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


def as_image_list(value: Any) -> Any:
    """Accept a single image reference where a list is expected."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class UserSummary(CamelModel):
    """Public part of a user shown next to their reviews."""

    id: UUID = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    avatar: Optional[str] = Field(None, description="Avatar URL")


class TourSummary(CamelModel):
    """Minimal tour reference embedded in other resources."""

    id: UUID = Field(..., description="Tour ID")
    name: str = Field(..., description="Tour name")
    city: str = Field(..., description="Tour city")


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def envelope(status_code: int = 200, message: Optional[str] = None, **payload: Any) -> JSONResponse:
    """
    Build a success response ``{success: true, message?, <key>: ..., count?}``.

    Args:
        status_code: HTTP status code
        message: Localized message, omitted when None
        **payload: Resource keys; schemas are dumped with camelCase aliases

    Returns:
        JSONResponse: Response envelope
    """
    content: dict[str, Any] = {"success": True}
    if message is not None:
        content["message"] = message
    for key, value in payload.items():
        content[key] = _dump(value)
    return JSONResponse(status_code=status_code, content=content)
