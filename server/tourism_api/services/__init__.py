"""Service layer package."""

from .auth_service import AuthService
from .car_service import CarService
from .favorite_service import FavoriteService
from .itinerary_service import ItineraryService
from .review_service import ReviewService
from .tour_service import TourService

__all__ = [
    "AuthService",
    "CarService",
    "FavoriteService",
    "ItineraryService",
    "ReviewService",
    "TourService",
]
