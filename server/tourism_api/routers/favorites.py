"""Favorites router: a user's bookmarked tours and cars."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import AuthContext, RequestContext
from ..core.exceptions import ApiError, InternalServerError
from ..core.i18n import translate
from ..schemas.common import envelope
from ..schemas.favorite import FavoriteCar, FavoriteRecord, FavoriteTour
from ..services.favorite_service import FavoriteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/favorites", tags=["favorites"])


@router.get("/tours")
async def list_favorite_tours(
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Caller's favorite tours, most recently added first."""
    favorite_service = FavoriteService(db)

    try:
        favorites = await favorite_service.list_favorite_tours(ctx.user_id)
        data = [FavoriteTour.from_model(favorite) for favorite in favorites]
        return envelope(count=len(data), tours=data)

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error listing favorite tours",
            extra={"user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="favorite.get_tours_error")


@router.get("/cars")
async def list_favorite_cars(
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Caller's favorite cars, most recently added first."""
    favorite_service = FavoriteService(db)

    try:
        favorites = await favorite_service.list_favorite_cars(ctx.user_id)
        data = [FavoriteCar.from_model(favorite) for favorite in favorites]
        return envelope(count=len(data), cars=data)

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error listing favorite cars",
            extra={"user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="favorite.get_cars_error")


@router.post("/tours/{tour_id}", status_code=201)
async def add_favorite_tour(
    tour_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Bookmark a tour."""
    favorite_service = FavoriteService(db)

    try:
        favorite = await favorite_service.add_tour(ctx.user_id, tour_id)
        return envelope(
            status_code=201,
            message=translate("favorite.tour_added", ctx.locale),
            favorite=FavoriteRecord.model_validate(favorite),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error adding favorite tour",
            extra={"tour_id": str(tour_id), "user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="favorite.add_error")


@router.post("/cars/{car_id}", status_code=201)
async def add_favorite_car(
    car_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Bookmark a car."""
    favorite_service = FavoriteService(db)

    try:
        favorite = await favorite_service.add_car(ctx.user_id, car_id)
        return envelope(
            status_code=201,
            message=translate("favorite.car_added", ctx.locale),
            favorite=FavoriteRecord.model_validate(favorite),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error adding favorite car",
            extra={"car_id": str(car_id), "user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="favorite.add_error")


@router.delete("/tours/{tour_id}")
async def remove_favorite_tour(
    tour_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Remove a tour from the caller's favorites."""
    favorite_service = FavoriteService(db)

    try:
        await favorite_service.remove_tour(ctx.user_id, tour_id)
        return envelope(message=translate("favorite.tour_removed", ctx.locale))

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error removing favorite tour",
            extra={"tour_id": str(tour_id), "user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="favorite.remove_error")


@router.delete("/cars/{car_id}")
async def remove_favorite_car(
    car_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Remove a car from the caller's favorites."""
    favorite_service = FavoriteService(db)

    try:
        await favorite_service.remove_car(ctx.user_id, car_id)
        return envelope(message=translate("favorite.car_removed", ctx.locale))

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error removing favorite car",
            extra={"car_id": str(car_id), "user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="favorite.remove_error")
