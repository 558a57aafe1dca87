"""Itinerary router: tour days and the activities of each day."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import AuthContext, PublicContext, RequestContext
from ..core.exceptions import ApiError, InternalServerError
from ..core.i18n import translate
from ..schemas.common import envelope
from ..schemas.itinerary import (
    CreateDayRequest,
    CreateItemRequest,
    DayItem,
    TourDay,
    UpdateDayRequest,
    UpdateItemRequest,
)
from ..services.itinerary_service import ItineraryService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["itinerary"])


@router.post("/tours/{tour_id}/days", status_code=201)
async def create_day(
    tour_id: UUID,
    payload: CreateDayRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Add a day to a tour program."""
    try:
        day = await ItineraryService(db).create_day(tour_id, payload)
        return envelope(
            status_code=201,
            message=translate("itinerary.day_created", ctx.locale),
            day=TourDay.from_model(day),
        )
    except ApiError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error creating tour day",
            extra={"tour_id": str(tour_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="itinerary.save_error")


@router.get("/tours/{tour_id}/days")
async def list_days(
    tour_id: UUID,
    ctx: RequestContext = PublicContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Days of a tour ordered by day number, each with its items."""
    try:
        days = await ItineraryService(db).list_days(tour_id)
        data = [TourDay.from_model(day) for day in days]
        return envelope(count=len(data), days=data)
    except ApiError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error listing tour days",
            extra={"tour_id": str(tour_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="itinerary.get_days_error")


@router.put("/days/{day_id}")
async def update_day(
    day_id: UUID,
    payload: UpdateDayRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Change the number or title of a day."""
    try:
        day = await ItineraryService(db).update_day(day_id, payload)
        return envelope(
            message=translate("itinerary.day_updated", ctx.locale),
            day=TourDay.from_model(day),
        )
    except ApiError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error updating tour day",
            extra={"day_id": str(day_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="itinerary.save_error")


@router.delete("/days/{day_id}")
async def delete_day(
    day_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Delete a day with all of its items."""
    try:
        await ItineraryService(db).delete_day(day_id)
        return envelope(message=translate("itinerary.day_deleted", ctx.locale))
    except ApiError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error deleting tour day",
            extra={"day_id": str(day_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="itinerary.delete_error")


@router.post("/days/{day_id}/items", status_code=201)
async def create_item(
    day_id: UUID,
    payload: CreateItemRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Add an activity to a day."""
    try:
        item = await ItineraryService(db).create_item(day_id, payload)
        return envelope(
            status_code=201,
            message=translate("itinerary.item_created", ctx.locale),
            item=DayItem.model_validate(item),
        )
    except ApiError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error creating tour day item",
            extra={"day_id": str(day_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="itinerary.save_error")


@router.get("/days/{day_id}/items")
async def list_items(
    day_id: UUID,
    ctx: RequestContext = PublicContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Activities of a day in creation order."""
    try:
        items = await ItineraryService(db).list_items(day_id)
        data = [DayItem.model_validate(item) for item in items]
        return envelope(count=len(data), items=data)
    except ApiError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error listing tour day items",
            extra={"day_id": str(day_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="itinerary.get_items_error")


@router.put("/items/{item_id}")
async def update_item(
    item_id: UUID,
    payload: UpdateItemRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Update the allow-listed fields of an activity."""
    try:
        item = await ItineraryService(db).update_item(item_id, payload)
        return envelope(
            message=translate("itinerary.item_updated", ctx.locale),
            item=DayItem.model_validate(item),
        )
    except ApiError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error updating tour day item",
            extra={"item_id": str(item_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="itinerary.save_error")


@router.delete("/items/{item_id}")
async def delete_item(
    item_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Delete an activity."""
    try:
        await ItineraryService(db).delete_item(item_id)
        return envelope(message=translate("itinerary.item_deleted", ctx.locale))
    except ApiError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error deleting tour day item",
            extra={"item_id": str(item_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="itinerary.delete_error")
