"""Tour-related Pydantic schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator

from ..core.rating import average_rating
from .car import TourCar
from .common import CamelModel, PatchModel, as_image_list
from .review import TourReview


class CreateTourRequest(CamelModel):
    """Request schema for creating a tour."""

    name: str = Field(..., min_length=1, max_length=255, description="Tour name")
    price: float = Field(..., ge=0, description="Tour price")
    description: str = Field(..., min_length=1, max_length=10000, description="Tour description")
    city: str = Field(..., min_length=1, max_length=128, description="City")
    category: str = Field(..., min_length=1, max_length=128, description="Category")
    date: str = Field(..., min_length=1, max_length=64, description="Date or season of the tour")
    duration: int = Field(..., gt=0, description="Duration in days")
    max_people: int = Field(..., gt=0, description="Group size limit")
    images: list[str] = Field(default_factory=list, description="Image URLs")

    @field_validator("images", mode="before")
    @classmethod
    def wrap_images(cls, v):
        return as_image_list(v)


class UpdateTourRequest(PatchModel):
    """Request schema for a partial tour update."""

    name: str = Field(None, min_length=1, max_length=255)
    price: float = Field(None, ge=0)
    description: str = Field(None, min_length=1, max_length=10000)
    city: str = Field(None, min_length=1, max_length=128)
    category: str = Field(None, min_length=1, max_length=128)
    date: str = Field(None, min_length=1, max_length=64)
    duration: int = Field(None, gt=0)
    max_people: int = Field(None, gt=0)
    images: list[str] = None

    @field_validator("images", mode="before")
    @classmethod
    def wrap_images(cls, v):
        return as_image_list(v)


class TourBase(CamelModel):
    """Stored tour attributes."""

    id: UUID = Field(..., description="Unique tour ID")
    name: str
    price: float
    description: str
    city: str
    category: str
    date: str
    duration: int
    max_people: int
    images: list[str] = Field(default_factory=list)
    created_at: datetime = Field(..., description="Creation time (ISO 8601)")


class Tour(TourBase):
    """
    Tour response schema with derived fields.

    Built from a tour whose ``reviews`` (with their authors), ``cars`` (with
    their reviews) and ``favorites`` relationships are loaded.
    """

    avg_rating: float = Field(0.0, description="Mean review rating, one decimal")
    reviews: list[TourReview] = Field(default_factory=list, description="Reviews, newest first")
    reviews_count: int = Field(0, description="Number of reviews")
    favorites_count: int = Field(0, description="Number of users who bookmarked the tour")
    cars: list[TourCar] = Field(default_factory=list, description="Cars attached to the tour")

    @classmethod
    def from_model(cls, tour: Any) -> "Tour":
        return cls(
            **TourBase.model_validate(tour).model_dump(),
            avg_rating=average_rating(tour.reviews),
            reviews=[TourReview.model_validate(review) for review in tour.reviews],
            reviews_count=len(tour.reviews),
            favorites_count=len(tour.favorites),
            cars=[TourCar.from_model(car) for car in tour.cars],
        )
