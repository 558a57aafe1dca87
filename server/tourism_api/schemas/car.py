"""Car-related Pydantic schemas."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import Field, field_validator

from ..core.rating import average_rating
from .common import CamelModel, PatchModel, TourSummary, as_image_list
from .review import CarReview


class CreateCarRequest(CamelModel):
    """Request schema for creating a car."""

    tour_id: Optional[UUID] = Field(None, description="Tour the car belongs to")
    category: str = Field(..., min_length=1, max_length=128, description="Car category")
    brand: str = Field(..., min_length=1, max_length=128, description="Brand")
    model: str = Field(..., min_length=1, max_length=128, description="Model")
    price: float = Field(..., ge=0, description="Rental price")
    capacity: int = Field(..., gt=0, description="Luggage capacity")
    drive: str = Field(..., min_length=1, max_length=64, description="Drive type")
    year: int = Field(..., ge=1900, le=2100, description="Production year")
    places: int = Field(..., gt=0, description="Number of seats")
    transmission: str = Field(..., min_length=1, max_length=64, description="Transmission type")
    fuel_type: str = Field(..., min_length=1, max_length=64, description="Fuel type")
    images: list[str] = Field(default_factory=list, description="Image URLs")

    @field_validator("images", mode="before")
    @classmethod
    def wrap_images(cls, v):
        return as_image_list(v)


class UpdateCarRequest(PatchModel):
    """Request schema for a partial car update. ``tourId: null`` detaches the car."""

    tour_id: Optional[UUID] = None
    category: str = Field(None, min_length=1, max_length=128)
    brand: str = Field(None, min_length=1, max_length=128)
    model: str = Field(None, min_length=1, max_length=128)
    price: float = Field(None, ge=0)
    capacity: int = Field(None, gt=0)
    drive: str = Field(None, min_length=1, max_length=64)
    year: int = Field(None, ge=1900, le=2100)
    places: int = Field(None, gt=0)
    transmission: str = Field(None, min_length=1, max_length=64)
    fuel_type: str = Field(None, min_length=1, max_length=64)
    images: list[str] = None

    @field_validator("images", mode="before")
    @classmethod
    def wrap_images(cls, v):
        return as_image_list(v)


class CarBase(CamelModel):
    """Stored car attributes."""

    id: UUID = Field(..., description="Unique car ID")
    tour_id: Optional[UUID] = Field(None, description="Owning tour ID")
    category: str
    brand: str
    model: str
    price: float
    capacity: int
    drive: str
    year: int
    places: int
    transmission: str
    fuel_type: str
    images: list[str] = Field(default_factory=list)
    created_at: datetime = Field(..., description="Creation time (ISO 8601)")


class TourCar(CarBase):
    """Car as listed inside a tour. Requires the car's reviews to be loaded."""

    avg_rating: float = Field(0.0, description="Mean review rating, one decimal")

    @classmethod
    def from_model(cls, car: Any) -> "TourCar":
        return cls(
            **CarBase.model_validate(car).model_dump(),
            avg_rating=average_rating(car.reviews),
        )


class Car(CarBase):
    """
    Car response schema.

    Built from a car whose ``reviews`` (with their authors), ``tour`` and
    ``favorites`` relationships are loaded.
    """

    avg_rating: float = Field(0.0, description="Mean review rating, one decimal")
    reviews: list[CarReview] = Field(default_factory=list, description="Reviews, newest first")
    reviews_count: int = Field(0, description="Number of reviews")
    favorites_count: int = Field(0, description="Number of users who bookmarked the car")
    tour: Optional[TourSummary] = Field(None, description="Owning tour")

    @classmethod
    def from_model(cls, car: Any) -> "Car":
        return cls(
            **CarBase.model_validate(car).model_dump(),
            avg_rating=average_rating(car.reviews),
            reviews=[CarReview.model_validate(review) for review in car.reviews],
            reviews_count=len(car.reviews),
            favorites_count=len(car.favorites),
            tour=TourSummary.model_validate(car.tour) if car.tour is not None else None,
        )
