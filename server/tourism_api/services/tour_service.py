"""Tour service for business logic operations."""

import logging
from typing import Mapping, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import NotFoundError
from ..models.car import Car
from ..models.review import TourReview
from ..models.tour import Tour
from ..schemas.tour import CreateTourRequest, UpdateTourRequest
from .persistence import commit
from .query_builder import apply_list_query, build_tour_query

logger = logging.getLogger(__name__)

# Relationships read by the tour response schema
TOUR_DETAIL_OPTIONS = (
    selectinload(Tour.reviews).selectinload(TourReview.user),
    selectinload(Tour.cars).selectinload(Car.reviews),
    selectinload(Tour.favorites),
)


class TourService:
    """Service for tour-related operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_tours(self, params: Mapping[str, str]) -> Sequence[Tour]:
        """
        List tours matching the query parameters.

        Args:
            params: Raw query parameters (``city``, ``category``,
                ``minPrice``, ``maxPrice``, ``sort``)

        Returns:
            Tours with the relationships the response needs
        """
        query = build_tour_query(params)
        stmt = apply_list_query(select(Tour).options(*TOUR_DETAIL_OPTIONS), Tour, query)
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        return result.scalars().all()

    async def get_tour(self, tour_id: UUID) -> Tour:
        """
        Get a tour with its reviews, cars and favorites.

        Raises:
            NotFoundError: If the tour does not exist
        """
        stmt = (
            select(Tour)
            .options(*TOUR_DETAIL_OPTIONS)
            .where(Tour.id == tour_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        tour = result.scalar_one_or_none()
        if tour is None:
            raise NotFoundError(resource_type="tour", resource_id=str(tour_id), message_key="tour.not_found")
        return tour

    async def _get_plain(self, tour_id: UUID) -> Tour:
        result = await self.db.execute(select(Tour).where(Tour.id == tour_id))
        tour = result.scalar_one_or_none()
        if tour is None:
            raise NotFoundError(resource_type="tour", resource_id=str(tour_id), message_key="tour.not_found")
        return tour

    async def create_tour(self, request: CreateTourRequest) -> Tour:
        """
        Create a new tour.

        Args:
            request: Tour creation request

        Returns:
            Created tour entity
        """
        tour = Tour(**request.model_dump())
        self.db.add(tour)
        await commit(self.db)

        logger.info(
            "Tour created successfully",
            extra={
                "tour_id": str(tour.id),
                "name": tour.name,
                "city": tour.city
            }
        )
        return await self.get_tour(tour.id)

    async def update_tour(self, tour_id: UUID, request: UpdateTourRequest) -> Tour:
        """
        Apply a partial update; only fields sent by the client change.

        Raises:
            NotFoundError: If the tour does not exist
        """
        tour = await self._get_plain(tour_id)
        changes = request.to_patch()
        for name, value in changes.items():
            setattr(tour, name, value)
        await commit(self.db)

        logger.info("Tour updated", extra={"tour_id": str(tour_id), "fields": sorted(changes)})
        return await self.get_tour(tour_id)

    async def delete_tour(self, tour_id: UUID) -> None:
        """
        Delete a tour with its reviews, favorites and program. Attached cars
        are kept and detached.

        Raises:
            NotFoundError: If the tour does not exist
        """
        tour = await self._get_plain(tour_id)
        await self.db.delete(tour)
        await commit(self.db)
        logger.info("Tour deleted", extra={"tour_id": str(tour_id)})
