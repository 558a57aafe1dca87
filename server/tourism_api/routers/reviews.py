"""Review router for tour, car and site reviews."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import AuthContext, PublicContext, RequestContext
from ..core.exceptions import ApiError, InternalServerError
from ..core.i18n import translate
from ..schemas.common import envelope
from ..schemas.review import CarReview, CreateReviewRequest, CreateSiteReviewRequest, SiteReview, TourReview
from ..services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("/tour/{tour_id}", status_code=201)
async def add_tour_review(
    tour_id: UUID,
    payload: CreateReviewRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Review a tour. One review per user and tour."""
    review_service = ReviewService(db)

    try:
        review = await review_service.add_tour_review(tour_id, ctx.user_id, payload)
        return envelope(
            status_code=201,
            message=translate("review.created", ctx.locale),
            review=TourReview.model_validate(review),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error creating tour review",
            extra={"tour_id": str(tour_id), "user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="review.create_error")


@router.post("/car/{car_id}", status_code=201)
async def add_car_review(
    car_id: UUID,
    payload: CreateReviewRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Review a car. One review per user and car."""
    review_service = ReviewService(db)

    try:
        review = await review_service.add_car_review(car_id, ctx.user_id, payload)
        return envelope(
            status_code=201,
            message=translate("review.created", ctx.locale),
            review=CarReview.model_validate(review),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error creating car review",
            extra={"car_id": str(car_id), "user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="review.create_error")


@router.get("/site")
async def list_site_reviews(
    category: Optional[str] = Query(None, description="service, website or support"),
    ctx: RequestContext = PublicContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Site reviews, newest first."""
    review_service = ReviewService(db)

    try:
        reviews = await review_service.list_site_reviews(category)
        data = [SiteReview.model_validate(review) for review in reviews]
        return envelope(count=len(data), reviews=data)

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error listing site reviews",
            extra={"category": category, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="review.get_all_error")


@router.post("/site", status_code=201)
async def add_site_review(
    payload: CreateSiteReviewRequest,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Leave feedback about the platform."""
    review_service = ReviewService(db)

    try:
        review = await review_service.add_site_review(ctx.user_id, payload)
        return envelope(
            status_code=201,
            message=translate("review.created", ctx.locale),
            review=SiteReview.model_validate(review),
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error creating site review",
            extra={"user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="review.create_error")


async def _delete_review(delete, review_id: UUID, ctx: RequestContext, resource: str) -> JSONResponse:
    try:
        await delete(review_id, ctx.user_id)
        return envelope(message=translate("review.deleted", ctx.locale))

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error deleting review",
            extra={"review_id": str(review_id), "resource": resource, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="review.delete_error")


@router.delete("/tour/{review_id}")
async def delete_tour_review(
    review_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Delete one of the caller's tour reviews."""
    return await _delete_review(ReviewService(db).delete_tour_review, review_id, ctx, "tour")


@router.delete("/car/{review_id}")
async def delete_car_review(
    review_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Delete one of the caller's car reviews."""
    return await _delete_review(ReviewService(db).delete_car_review, review_id, ctx, "car")


@router.delete("/site/{review_id}")
async def delete_site_review(
    review_id: UUID,
    ctx: RequestContext = AuthContext,
    db: AsyncSession = Depends(get_db)
) -> JSONResponse:
    """Delete one of the caller's site reviews."""
    return await _delete_review(ReviewService(db).delete_site_review, review_id, ctx, "site")
