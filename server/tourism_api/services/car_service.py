"""Car service for business logic operations."""

import logging
from typing import Mapping, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import NotFoundError
from ..models.car import Car
from ..models.review import CarReview
from ..schemas.car import CreateCarRequest, UpdateCarRequest
from .persistence import commit
from .query_builder import apply_list_query, build_car_query

logger = logging.getLogger(__name__)

# Relationships read by the car response schema
CAR_DETAIL_OPTIONS = (
    selectinload(Car.reviews).selectinload(CarReview.user),
    selectinload(Car.tour),
    selectinload(Car.favorites),
)


class CarService:
    """Service for car-related operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_cars(self, params: Mapping[str, str]) -> Sequence[Car]:
        """
        List cars matching the query parameters.

        Args:
            params: Raw query parameters (``category``, ``brand``,
                ``transmission``, ``year``, ``minPrice``, ``maxPrice``, ``sort``)
        """
        query = build_car_query(params)
        stmt = apply_list_query(select(Car).options(*CAR_DETAIL_OPTIONS), Car, query)
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        return result.scalars().all()

    async def get_car(self, car_id: UUID) -> Car:
        """
        Get a car with its reviews, tour and favorites.

        Raises:
            NotFoundError: If the car does not exist
        """
        stmt = (
            select(Car)
            .options(*CAR_DETAIL_OPTIONS)
            .where(Car.id == car_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        car = result.scalar_one_or_none()
        if car is None:
            raise NotFoundError(resource_type="car", resource_id=str(car_id), message_key="car.not_found")
        return car

    async def _get_plain(self, car_id: UUID) -> Car:
        result = await self.db.execute(select(Car).where(Car.id == car_id))
        car = result.scalar_one_or_none()
        if car is None:
            raise NotFoundError(resource_type="car", resource_id=str(car_id), message_key="car.not_found")
        return car

    async def create_car(self, request: CreateCarRequest) -> Car:
        """
        Create a new car.

        Raises:
            ValidationError: If ``tour_id`` references no tour
        """
        car = Car(**request.model_dump())
        self.db.add(car)
        await commit(self.db, invalid_reference_key="car.invalid_tour")

        logger.info(
            "Car created successfully",
            extra={
                "car_id": str(car.id),
                "brand": car.brand,
                "tour_id": str(car.tour_id) if car.tour_id else None
            }
        )
        return await self.get_car(car.id)

    async def update_car(self, car_id: UUID, request: UpdateCarRequest) -> Car:
        """
        Apply a partial update. An explicit null ``tour_id`` detaches the car.

        Raises:
            NotFoundError: If the car does not exist
            ValidationError: If the new ``tour_id`` references no tour
        """
        car = await self._get_plain(car_id)
        changes = request.to_patch()
        for name, value in changes.items():
            setattr(car, name, value)
        await commit(self.db, invalid_reference_key="car.invalid_tour")

        logger.info("Car updated", extra={"car_id": str(car_id), "fields": sorted(changes)})
        return await self.get_car(car_id)

    async def delete_car(self, car_id: UUID) -> None:
        """
        Delete a car with its reviews and favorites.

        Raises:
            NotFoundError: If the car does not exist
        """
        car = await self._get_plain(car_id)
        await self.db.delete(car)
        await commit(self.db)
        logger.info("Car deleted", extra={"car_id": str(car_id)})
