"""Tour program (days and day items) Pydantic schemas."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import Field, field_validator

from .common import CamelModel, PatchModel, as_image_list


class CreateDayRequest(CamelModel):
    """Request schema for adding a day to a tour program."""

    day_number: int = Field(..., ge=1, description="Position of the day in the program")
    title: Optional[str] = Field(None, max_length=255, description="Day title")


class UpdateDayRequest(PatchModel):
    """Request schema for a partial day update."""

    day_number: int = Field(None, ge=1)
    title: Optional[str] = Field(None, max_length=255)


class CreateItemRequest(CamelModel):
    """Request schema for adding an activity to a day."""

    title: str = Field(..., min_length=1, max_length=255, description="Activity title")
    description: str = Field(..., min_length=1, max_length=10000, description="Activity description")
    images: list[str] = Field(default_factory=list, description="Image URLs")
    point_start: Optional[str] = Field(None, max_length=255, description="Starting point")
    point_end: Optional[str] = Field(None, max_length=255, description="End point")
    location: Optional[str] = Field(None, max_length=255, description="Location")
    price: Optional[float] = Field(None, ge=0, description="Extra cost")
    duration: Optional[str] = Field(None, max_length=64, description="Free-form duration, e.g. 2h")
    complexity: Optional[str] = Field(None, max_length=64, description="Difficulty")

    @field_validator("images", mode="before")
    @classmethod
    def wrap_images(cls, v):
        return as_image_list(v)


class UpdateItemRequest(PatchModel):
    """Request schema for a partial item update."""

    title: str = Field(None, min_length=1, max_length=255)
    description: str = Field(None, min_length=1, max_length=10000)
    images: list[str] = None
    point_start: Optional[str] = Field(None, max_length=255)
    point_end: Optional[str] = Field(None, max_length=255)
    location: Optional[str] = Field(None, max_length=255)
    price: Optional[float] = Field(None, ge=0)
    duration: Optional[str] = Field(None, max_length=64)
    complexity: Optional[str] = Field(None, max_length=64)

    @field_validator("images", mode="before")
    @classmethod
    def wrap_images(cls, v):
        return as_image_list(v)


class DayItem(CamelModel):
    """Day item response schema."""

    id: UUID = Field(..., description="Unique item ID")
    day_id: UUID = Field(..., description="Owning day ID")
    title: str
    description: str
    images: list[str] = Field(default_factory=list)
    point_start: Optional[str] = None
    point_end: Optional[str] = None
    location: Optional[str] = None
    price: Optional[float] = None
    duration: Optional[str] = None
    complexity: Optional[str] = None
    created_at: datetime = Field(..., description="Creation time (ISO 8601)")


class TourDay(CamelModel):
    """Tour day response schema, items in creation order."""

    id: UUID = Field(..., description="Unique day ID")
    tour_id: UUID = Field(..., description="Owning tour ID")
    day_number: int = Field(..., description="Position of the day in the program")
    title: Optional[str] = None
    created_at: datetime = Field(..., description="Creation time (ISO 8601)")
    items: list[DayItem] = Field(default_factory=list)

    @classmethod
    def from_model(cls, day: Any) -> "TourDay":
        return cls(
            id=day.id,
            tour_id=day.tour_id,
            day_number=day.day_number,
            title=day.title,
            created_at=day.created_at,
            items=[DayItem.model_validate(item) for item in day.items],
        )


class TourProgram(CamelModel):
    """Full program of a tour."""

    tour_id: UUID = Field(..., description="Tour ID")
    days: list[TourDay] = Field(default_factory=list)
