"""Models module exporting all database models."""

from .car import Car
from .favorite import FavoriteCar, FavoriteTour
from .itinerary import TourDay, TourDayItem
from .review import CarReview, SiteReview, SiteReviewCategory, TourReview
from .tour import Tour
from .user import User

__all__ = [
    # Accounts
    "User",

    # Catalog
    "Tour",
    "Car",

    # Reviews
    "TourReview",
    "CarReview",
    "SiteReview",
    "SiteReviewCategory",

    # Favorites
    "FavoriteTour",
    "FavoriteCar",

    # Itinerary
    "TourDay",
    "TourDayItem",
]
