"""Authentication-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from .common import CamelModel


class RegisterRequest(CamelModel):
    """Request schema for creating an account."""

    username: str = Field(..., min_length=1, max_length=64, description="Unique username")
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$", description="Unique email")
    password: str = Field(..., min_length=1, max_length=128, description="Plaintext password")


class LoginRequest(CamelModel):
    """Request schema for logging in."""

    email: str = Field(..., min_length=1, description="Account email")
    password: str = Field(..., min_length=1, description="Plaintext password")


class User(CamelModel):
    """Account response schema. Never includes the password hash."""

    id: UUID = Field(..., description="Unique user ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="Email")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    created_at: datetime = Field(..., description="Registration time (ISO 8601)")


class UserProfile(User):
    """Account with activity counters, returned by ``/auth/me``."""

    favorite_tours_count: int = Field(0, description="Number of favorite tours")
    favorite_cars_count: int = Field(0, description="Number of favorite cars")
    tour_reviews_count: int = Field(0, description="Number of tour reviews written")
    car_reviews_count: int = Field(0, description="Number of car reviews written")
