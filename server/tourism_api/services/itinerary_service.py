"""Tour program service: days of a tour and the items of each day."""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import NotFoundError
from ..models.itinerary import TourDay, TourDayItem
from ..models.tour import Tour
from ..schemas.itinerary import CreateDayRequest, CreateItemRequest, UpdateDayRequest, UpdateItemRequest
from .persistence import commit

logger = logging.getLogger(__name__)


class ItineraryService:
    """Service for tour days and day items."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _ensure_tour(self, tour_id: UUID) -> None:
        result = await self.db.execute(select(Tour.id).where(Tour.id == tour_id))
        if result.first() is None:
            raise NotFoundError(resource_type="tour", resource_id=str(tour_id), message_key="itinerary.tour_not_found")

    async def get_day(self, day_id: UUID) -> TourDay:
        """
        Get a day with its items.

        Raises:
            NotFoundError: If the day does not exist
        """
        stmt = (
            select(TourDay)
            .options(selectinload(TourDay.items))
            .where(TourDay.id == day_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        day = result.scalar_one_or_none()
        if day is None:
            raise NotFoundError(resource_type="tour_day", resource_id=str(day_id), message_key="itinerary.day_not_found")
        return day

    async def _get_item(self, item_id: UUID) -> TourDayItem:
        result = await self.db.execute(select(TourDayItem).where(TourDayItem.id == item_id))
        item = result.scalar_one_or_none()
        if item is None:
            raise NotFoundError(resource_type="tour_day_item", resource_id=str(item_id), message_key="itinerary.item_not_found")
        return item

    async def list_days(self, tour_id: UUID) -> Sequence[TourDay]:
        """
        Days of a tour ordered by day number, each with its items.

        Raises:
            NotFoundError: If the tour does not exist
        """
        await self._ensure_tour(tour_id)
        stmt = (
            select(TourDay)
            .options(selectinload(TourDay.items))
            .where(TourDay.tour_id == tour_id)
            .order_by(TourDay.day_number, TourDay.created_at)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_day(self, tour_id: UUID, request: CreateDayRequest) -> TourDay:
        """
        Add a day to a tour program.

        Raises:
            NotFoundError: If the tour does not exist
        """
        await self._ensure_tour(tour_id)
        day = TourDay(tour_id=tour_id, **request.model_dump())
        self.db.add(day)
        await commit(self.db, invalid_reference_key="itinerary.tour_not_found")

        logger.info(
            "Tour day created",
            extra={"day_id": str(day.id), "tour_id": str(tour_id), "day_number": day.day_number}
        )
        return await self.get_day(day.id)

    async def update_day(self, day_id: UUID, request: UpdateDayRequest) -> TourDay:
        """
        Raises:
            NotFoundError: If the day does not exist
        """
        day = await self.get_day(day_id)
        for name, value in request.to_patch().items():
            setattr(day, name, value)
        await commit(self.db)
        return await self.get_day(day_id)

    async def delete_day(self, day_id: UUID) -> None:
        """
        Delete a day with its items.

        Raises:
            NotFoundError: If the day does not exist
        """
        day = await self.get_day(day_id)
        await self.db.delete(day)
        await commit(self.db)
        logger.info("Tour day deleted", extra={"day_id": str(day_id)})

    async def list_items(self, day_id: UUID) -> Sequence[TourDayItem]:
        """
        Items of a day in creation order.

        Raises:
            NotFoundError: If the day does not exist
        """
        day = await self.get_day(day_id)
        return day.items

    async def create_item(self, day_id: UUID, request: CreateItemRequest) -> TourDayItem:
        """
        Add an activity to a day.

        Raises:
            NotFoundError: If the day does not exist
        """
        await self.get_day(day_id)
        item = TourDayItem(day_id=day_id, **request.model_dump())
        self.db.add(item)
        await commit(self.db, invalid_reference_key="itinerary.day_not_found")

        logger.info("Tour day item created", extra={"item_id": str(item.id), "day_id": str(day_id)})
        return item

    async def update_item(self, item_id: UUID, request: UpdateItemRequest) -> TourDayItem:
        """
        Raises:
            NotFoundError: If the item does not exist
        """
        item = await self._get_item(item_id)
        for name, value in request.to_patch().items():
            setattr(item, name, value)
        await commit(self.db)
        return item

    async def delete_item(self, item_id: UUID) -> None:
        """
        Raises:
            NotFoundError: If the item does not exist
        """
        item = await self._get_item(item_id)
        await self.db.delete(item)
        await commit(self.db)
        logger.info("Tour day item deleted", extra={"item_id": str(item_id)})
