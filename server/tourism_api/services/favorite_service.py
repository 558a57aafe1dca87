"""Favorite service for bookmarking tours and cars."""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import ConflictError, NotFoundError
from ..core.observability import metrics_collector
from ..models.car import Car
from ..models.favorite import FavoriteCar, FavoriteTour
from ..models.tour import Tour
from .persistence import commit

logger = logging.getLogger(__name__)


class FavoriteService:
    """Service for a user's favorite tours and cars."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_favorite_tours(self, user_id: UUID) -> Sequence[FavoriteTour]:
        """Favorites of the user, most recently added first, with tour reviews loaded."""
        stmt = (
            select(FavoriteTour)
            .options(selectinload(FavoriteTour.tour).selectinload(Tour.reviews))
            .where(FavoriteTour.user_id == user_id)
            .order_by(FavoriteTour.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def list_favorite_cars(self, user_id: UUID) -> Sequence[FavoriteCar]:
        """Favorites of the user, most recently added first, with car reviews loaded."""
        stmt = (
            select(FavoriteCar)
            .options(selectinload(FavoriteCar.car).selectinload(Car.reviews))
            .where(FavoriteCar.user_id == user_id)
            .order_by(FavoriteCar.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def _add(self, model, target_model, target_column: str, target_id: UUID, user_id: UUID, resource: str):
        not_found_key = f"favorite.{resource}_not_found"
        conflict_key = f"favorite.{resource}_already_added"

        target = await self.db.execute(select(target_model.id).where(target_model.id == target_id))
        if target.first() is None:
            raise NotFoundError(resource_type=resource, resource_id=str(target_id), message_key=not_found_key)

        existing = await self.db.execute(
            select(model.id).where(
                model.user_id == user_id,
                getattr(model, target_column) == target_id,
            )
        )
        if existing.first() is not None:
            raise ConflictError(message_key=conflict_key)

        favorite = model(user_id=user_id, **{target_column: target_id})
        self.db.add(favorite)
        await commit(self.db, conflict_key=conflict_key)

        metrics_collector.record_favorite_added(resource)
        logger.info(
            "Favorite added",
            extra={"favorite_id": str(favorite.id), "resource": resource, "resource_id": str(target_id)}
        )
        return favorite

    async def _remove(self, model, target_column: str, target_id: UUID, user_id: UUID, resource: str) -> None:
        result = await self.db.execute(
            select(model).where(
                model.user_id == user_id,
                getattr(model, target_column) == target_id,
            )
        )
        favorite = result.scalar_one_or_none()
        if favorite is None:
            raise NotFoundError(
                resource_type=f"favorite_{resource}",
                resource_id=str(target_id),
                message_key=f"favorite.{resource}_not_in_favorites",
            )

        await self.db.delete(favorite)
        await commit(self.db)
        logger.info("Favorite removed", extra={"resource": resource, "resource_id": str(target_id)})

    async def add_tour(self, user_id: UUID, tour_id: UUID) -> FavoriteTour:
        """
        Bookmark a tour.

        Raises:
            NotFoundError: If the tour does not exist
            ConflictError: If the tour is already a favorite
        """
        return await self._add(FavoriteTour, Tour, "tour_id", tour_id, user_id, "tour")

    async def add_car(self, user_id: UUID, car_id: UUID) -> FavoriteCar:
        """
        Bookmark a car.

        Raises:
            NotFoundError: If the car does not exist
            ConflictError: If the car is already a favorite
        """
        return await self._add(FavoriteCar, Car, "car_id", car_id, user_id, "car")

    async def remove_tour(self, user_id: UUID, tour_id: UUID) -> None:
        """
        Raises:
            NotFoundError: If the tour is not among the user's favorites
        """
        await self._remove(FavoriteTour, "tour_id", tour_id, user_id, "tour")

    async def remove_car(self, user_id: UUID, car_id: UUID) -> None:
        """
        Raises:
            NotFoundError: If the car is not among the user's favorites
        """
        await self._remove(FavoriteCar, "car_id", car_id, user_id, "car")
