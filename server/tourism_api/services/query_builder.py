"""
Translation of listing query parameters into filter and sort criteria.

The builders are pure: they take the raw ``str -> str`` query mapping of a
request and return a ``ListQuery``. They never raise. Empty parameters are
ignored, and numeric parameters that do not parse as finite numbers are
dropped rather than coerced, so ``maxPrice=abc`` simply means "no upper bound".
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from sqlalchemy import Select


class SortOrder(str, Enum):
    """Supported orderings of listings."""
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NEWEST = "newest"


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds; either side may be open."""

    gte: Optional[float] = None
    lte: Optional[float] = None


@dataclass(frozen=True)
class ListQuery:
    """Filter and sort criteria for a resource listing."""

    filters: Mapping[str, Any] = field(default_factory=dict)
    price: Optional[PriceRange] = None
    sort: SortOrder = SortOrder.NEWEST


TOUR_EXACT_FILTERS = ("city", "category")
CAR_EXACT_FILTERS = ("category", "brand", "transmission")


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a finite number, or return None for anything else."""
    if value is None:
        return None
    try:
        number = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer, or return None for anything else."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_sort(value: Optional[str]) -> SortOrder:
    """Map a sort parameter to a ``SortOrder``; unknown values sort newest first."""
    try:
        return SortOrder(value)
    except ValueError:
        return SortOrder.NEWEST


def build_price_range(params: Mapping[str, str]) -> Optional[PriceRange]:
    """Build the price bounds from ``minPrice`` / ``maxPrice``."""
    gte = parse_number(params.get("minPrice")) if params.get("minPrice") else None
    lte = parse_number(params.get("maxPrice")) if params.get("maxPrice") else None
    if gte is None and lte is None:
        return None
    return PriceRange(gte=gte, lte=lte)


def _exact_filters(params: Mapping[str, str], names: tuple[str, ...]) -> dict[str, Any]:
    return {name: params[name] for name in names if params.get(name)}


def build_tour_query(params: Mapping[str, str]) -> ListQuery:
    """
    Criteria for the tour listing.

    Recognized parameters: ``city``, ``category``, ``minPrice``, ``maxPrice``
    and ``sort``. Anything else is ignored.
    """
    return ListQuery(
        filters=_exact_filters(params, TOUR_EXACT_FILTERS),
        price=build_price_range(params),
        sort=parse_sort(params.get("sort")),
    )


def build_car_query(params: Mapping[str, str]) -> ListQuery:
    """
    Criteria for the car listing.

    Recognized parameters: ``category``, ``brand``, ``transmission``,
    ``year``, ``minPrice``, ``maxPrice`` and ``sort``.
    """
    filters = _exact_filters(params, CAR_EXACT_FILTERS)
    year = parse_int(params.get("year")) if params.get("year") else None
    if year is not None:
        filters["year"] = year
    return ListQuery(
        filters=filters,
        price=build_price_range(params),
        sort=parse_sort(params.get("sort")),
    )


def apply_list_query(stmt: Select, model: Any, query: ListQuery) -> Select:
    """
    Add the ``where`` and ``order_by`` clauses of a ``ListQuery`` to a select.

    Args:
        stmt: Select over ``model``
        model: Mapped class with ``price`` and ``created_at`` columns plus one
            column per filter name
        query: Criteria to apply

    Returns:
        Select: The narrowed and ordered statement
    """
    conditions = [getattr(model, name) == value for name, value in query.filters.items()]

    if query.price is not None:
        if query.price.gte is not None:
            conditions.append(model.price >= query.price.gte)
        if query.price.lte is not None:
            conditions.append(model.price <= query.price.lte)

    if conditions:
        stmt = stmt.where(*conditions)

    if query.sort is SortOrder.PRICE_ASC:
        return stmt.order_by(model.price.asc(), model.created_at.desc())
    if query.sort is SortOrder.PRICE_DESC:
        return stmt.order_by(model.price.desc(), model.created_at.desc())
    return stmt.order_by(model.created_at.desc())
