"""Average rating of a resource's reviews."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Protocol


class Rated(Protocol):
    rating: int


ONE_DECIMAL = Decimal("0.1")


def average_rating(reviews: Iterable[Rated]) -> float:
    """
    Mean rating rounded to one decimal place.

    Rounding is half-up on the exact decimal mean, so 1.25 becomes 1.3 and
    5/3 becomes 1.7. An empty collection averages to 0.

    Args:
        reviews: Objects with an integer ``rating``

    Returns:
        float: Rounded mean, or 0.0 without reviews
    """
    ratings = [review.rating for review in reviews]
    if not ratings:
        return 0.0
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))
