"""Tour router for tour catalog operations."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import AuthContext, PublicContext, RequestContext
from ..core.exceptions import ApiError, InternalServerError
from ..core.i18n import translate
from ..schemas.common import envelope
from ..schemas.itinerary import TourDay, TourProgram
from ..schemas.tour import CreateTourRequest, Tour, UpdateTourRequest
from ..services.itinerary_service import ItineraryService
from ..services.tour_service import TourService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tours", tags=["tours"])


@router.get("")
async def list_tours(
    request: Request,
    ctx: RequestContext = PublicContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """
    List tours.

    Filters: ``city``, ``category``, ``minPrice``, ``maxPrice``. Ordering:
    ``sort=price_asc|price_desc|newest`` (default newest).
    """
    tour_service = TourService(db)

    try:
        tours = await tour_service.list_tours(request.query_params)
        data = [Tour.from_model(tour) for tour in tours]
        return envelope(count=len(data), tours=data)

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error listing tours",
            extra={"query": str(request.query_params), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="tour.get_all_error")


@router.get("/{tour_id}")
async def get_tour(
    tour_id: UUID,
    ctx: RequestContext = PublicContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Get one tour with reviews (newest first), cars and rating."""
    tour_service = TourService(db)

    try:
        tour = await tour_service.get_tour(tour_id)
        return envelope(tour=Tour.from_model(tour))

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error loading tour",
            extra={"tour_id": str(tour_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="tour.get_one_error")


@router.post("", status_code=201)
async def create_tour(
    payload: CreateTourRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Create a tour."""
    tour_service = TourService(db)

    try:
        tour = await tour_service.create_tour(payload)
        return envelope(
            status_code=201,
            message=translate("tour.created", ctx.locale),
            tour=Tour.from_model(tour),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error creating tour",
            extra={"name": payload.name, "user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="tour.create_error")


@router.put("/{tour_id}")
async def update_tour(
    tour_id: UUID,
    payload: UpdateTourRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Update the allow-listed fields of a tour."""
    tour_service = TourService(db)

    try:
        tour = await tour_service.update_tour(tour_id, payload)
        return envelope(
            message=translate("tour.updated", ctx.locale),
            tour=Tour.from_model(tour),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error updating tour",
            extra={"tour_id": str(tour_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="tour.update_error")


@router.delete("/{tour_id}")
async def delete_tour(
    tour_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Delete a tour. Its cars stay in the catalog without a tour."""
    tour_service = TourService(db)

    try:
        await tour_service.delete_tour(tour_id)
        return envelope(message=translate("tour.deleted", ctx.locale))

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error deleting tour",
            extra={"tour_id": str(tour_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="tour.delete_error")


@router.get("/{tour_id}/program")
async def get_tour_program(
    tour_id: UUID,
    ctx: RequestContext = PublicContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Full day-by-day program of a tour."""
    itinerary_service = ItineraryService(db)

    try:
        days = await itinerary_service.list_days(tour_id)
        program = TourProgram(tour_id=tour_id, days=[TourDay.from_model(day) for day in days])
        return envelope(**program.model_dump(mode="json", by_alias=True))

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error loading tour program",
            extra={"tour_id": str(tour_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="tour.program_error")
