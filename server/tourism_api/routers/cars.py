"""Car router for car catalog operations."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import AuthContext, PublicContext, RequestContext
from ..core.exceptions import ApiError, InternalServerError
from ..core.i18n import translate
from ..schemas.car import Car, CreateCarRequest, UpdateCarRequest
from ..schemas.common import envelope
from ..services.car_service import CarService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("")
async def list_cars(
    request: Request,
    ctx: RequestContext = PublicContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """
    List cars.

    Filters: ``category``, ``brand``, ``transmission``, ``year``,
    ``minPrice``, ``maxPrice``. Ordering: ``sort`` as for tours.
    """
    car_service = CarService(db)

    try:
        cars = await car_service.list_cars(request.query_params)
        data = [Car.from_model(car) for car in cars]
        return envelope(count=len(data), cars=data)

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error listing cars",
            extra={"query": str(request.query_params), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="car.get_all_error")


@router.get("/{car_id}")
async def get_car(
    car_id: UUID,
    ctx: RequestContext = PublicContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Get one car with its reviews and tour summary."""
    car_service = CarService(db)

    try:
        car = await car_service.get_car(car_id)
        return envelope(car=Car.from_model(car))

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error loading car",
            extra={"car_id": str(car_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="car.get_one_error")


@router.post("", status_code=201)
async def create_car(
    payload: CreateCarRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Create a car, optionally attached to a tour."""
    car_service = CarService(db)

    try:
        car = await car_service.create_car(payload)
        return envelope(
            status_code=201,
            message=translate("car.created", ctx.locale),
            car=Car.from_model(car),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error creating car",
            extra={"brand": payload.brand, "model": payload.model, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="car.create_error")


@router.put("/{car_id}")
async def update_car(
    car_id: UUID,
    payload: UpdateCarRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Update the allow-listed fields of a car; ``tourId: null`` detaches it."""
    car_service = CarService(db)

    try:
        car = await car_service.update_car(car_id, payload)
        return envelope(
            message=translate("car.updated", ctx.locale),
            car=Car.from_model(car),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error updating car",
            extra={"car_id": str(car_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="car.update_error")


@router.delete("/{car_id}")
async def delete_car(
    car_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Delete a car with its reviews and favorites."""
    car_service = CarService(db)

    try:
        await car_service.delete_car(car_id)
        return envelope(message=translate("car.deleted", ctx.locale))

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error deleting car",
            extra={"car_id": str(car_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="car.delete_error")
