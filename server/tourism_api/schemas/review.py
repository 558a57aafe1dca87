"""Review-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from ..models.review import SiteReviewCategory
from .common import CamelModel, UserSummary, as_image_list


class CreateReviewRequest(CamelModel):
    """Request schema for reviewing a tour or a car."""

    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str = Field(..., min_length=1, max_length=5000, description="Review text")
    images: list[str] = Field(default_factory=list, description="Image URLs")

    @field_validator("images", mode="before")
    @classmethod
    def wrap_images(cls, v):
        return as_image_list(v)


class CreateSiteReviewRequest(CamelModel):
    """Request schema for reviewing the platform."""

    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str = Field(..., min_length=1, max_length=5000, description="Review text")
    category: SiteReviewCategory = Field(..., description="service, website or support")


class Review(CamelModel):
    """Fields shared by tour and car reviews."""

    id: UUID = Field(..., description="Unique review ID")
    user_id: UUID = Field(..., description="Author ID")
    rating: int = Field(..., description="Rating from 1 to 5")
    comment: str = Field(..., description="Review text")
    images: list[str] = Field(default_factory=list, description="Image URLs")
    created_at: datetime = Field(..., description="Creation time (ISO 8601)")
    user: Optional[UserSummary] = Field(None, description="Author")


class TourReview(Review):
    """Tour review response schema."""

    tour_id: UUID = Field(..., description="Reviewed tour ID")


class CarReview(Review):
    """Car review response schema."""

    car_id: UUID = Field(..., description="Reviewed car ID")


class SiteReview(CamelModel):
    """Site review response schema."""

    id: UUID = Field(..., description="Unique review ID")
    user_id: UUID = Field(..., description="Author ID")
    rating: int = Field(..., description="Rating from 1 to 5")
    comment: str = Field(..., description="Review text")
    category: SiteReviewCategory = Field(..., description="Review category")
    created_at: datetime = Field(..., description="Creation time (ISO 8601)")
    user: Optional[UserSummary] = Field(None, description="Author")
