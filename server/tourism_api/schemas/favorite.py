"""Favorite-related Pydantic schemas."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import Field

from ..core.rating import average_rating
from .car import CarBase
from .common import CamelModel
from .tour import TourBase


class FavoriteTour(TourBase):
    """Bookmarked tour. Built from a favorite whose tour and its reviews are loaded."""

    avg_rating: float = Field(0.0, description="Mean review rating, one decimal")
    reviews_count: int = Field(0, description="Number of reviews")
    favorite_id: UUID = Field(..., description="Favorite record ID")
    added_at: datetime = Field(..., description="When the tour was bookmarked")

    @classmethod
    def from_model(cls, favorite: Any) -> "FavoriteTour":
        tour = favorite.tour
        return cls(
            **TourBase.model_validate(tour).model_dump(),
            avg_rating=average_rating(tour.reviews),
            reviews_count=len(tour.reviews),
            favorite_id=favorite.id,
            added_at=favorite.created_at,
        )


class FavoriteCar(CarBase):
    """Bookmarked car. Built from a favorite whose car and its reviews are loaded."""

    avg_rating: float = Field(0.0, description="Mean review rating, one decimal")
    reviews_count: int = Field(0, description="Number of reviews")
    favorite_id: UUID = Field(..., description="Favorite record ID")
    added_at: datetime = Field(..., description="When the car was bookmarked")

    @classmethod
    def from_model(cls, favorite: Any) -> "FavoriteCar":
        car = favorite.car
        return cls(
            **CarBase.model_validate(car).model_dump(),
            avg_rating=average_rating(car.reviews),
            reviews_count=len(car.reviews),
            favorite_id=favorite.id,
            added_at=favorite.created_at,
        )


class FavoriteRecord(CamelModel):
    """Favorite record returned when a tour or car is bookmarked."""

    id: UUID = Field(..., description="Favorite record ID")
    user_id: UUID = Field(..., description="User ID")
    tour_id: Optional[UUID] = Field(None, description="Bookmarked tour ID")
    car_id: Optional[UUID] = Field(None, description="Bookmarked car ID")
    created_at: datetime = Field(..., description="When the resource was bookmarked")
