"""Review service for tour, car and site reviews."""

import logging
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError
from ..core.observability import metrics_collector
from ..models.car import Car
from ..models.review import CarReview, SiteReview, TourReview
from ..models.tour import Tour
from ..schemas.review import CreateReviewRequest, CreateSiteReviewRequest
from .persistence import commit

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Service for review operations.

    A user reviews a given tour or car at most once; the unique constraints on
    the review tables decide, the pre-check only short-cuts the common case.
    Only the author may delete a review.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _load_with_user(self, model, review_id: UUID):
        stmt = (
            select(model)
            .options(selectinload(model.user))
            .where(model.id == review_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def _add(
        self,
        model,
        target_model,
        target_column: str,
        target_id: UUID,
        user_id: UUID,
        request: CreateReviewRequest,
        resource: str,
    ):
        not_found_key = f"review.{resource}_not_found"

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
            raise ConflictError(message_key="review.already_left")

        review = model(
            user_id=user_id,
            rating=request.rating,
            comment=request.comment,
            images=request.images,
            **{target_column: target_id},
        )
        self.db.add(review)
        await commit(self.db, conflict_key="review.already_left")

        metrics_collector.record_review_created(resource)
        logger.info(
            "Review created",
            extra={
                "review_id": str(review.id),
                "resource": resource,
                "resource_id": str(target_id),
                "rating": review.rating
            }
        )
        return await self._load_with_user(model, review.id)

    async def _delete(self, model, review_id: UUID, user_id: UUID, resource: str) -> None:
        result = await self.db.execute(select(model).where(model.id == review_id))
        review = result.scalar_one_or_none()
        if review is None:
            raise NotFoundError(resource_type=f"{resource}_review", resource_id=str(review_id), message_key="review.not_found")
        if review.user_id != user_id:
            logger.warning(
                "Review deletion rejected - not the author",
                extra={"review_id": str(review_id), "user_id": str(user_id)}
            )
            raise AuthorizationError(message_key="review.forbidden")

        await self.db.delete(review)
        await commit(self.db)
        logger.info("Review deleted", extra={"review_id": str(review_id), "resource": resource})

    async def add_tour_review(self, tour_id: UUID, user_id: UUID, request: CreateReviewRequest) -> TourReview:
        """
        Review a tour.

        Raises:
            NotFoundError: If the tour does not exist
            ConflictError: If the user already reviewed the tour
        """
        return await self._add(TourReview, Tour, "tour_id", tour_id, user_id, request, "tour")

    async def add_car_review(self, car_id: UUID, user_id: UUID, request: CreateReviewRequest) -> CarReview:
        """
        Review a car.

        Raises:
            NotFoundError: If the car does not exist
            ConflictError: If the user already reviewed the car
        """
        return await self._add(CarReview, Car, "car_id", car_id, user_id, request, "car")

    async def delete_tour_review(self, review_id: UUID, user_id: UUID) -> None:
        """
        Raises:
            NotFoundError: If the review does not exist
            AuthorizationError: If the user is not the author
        """
        await self._delete(TourReview, review_id, user_id, "tour")

    async def delete_car_review(self, review_id: UUID, user_id: UUID) -> None:
        """
        Raises:
            NotFoundError: If the review does not exist
            AuthorizationError: If the user is not the author
        """
        await self._delete(CarReview, review_id, user_id, "car")

    async def delete_site_review(self, review_id: UUID, user_id: UUID) -> None:
        """
        Raises:
            NotFoundError: If the review does not exist
            AuthorizationError: If the user is not the author
        """
        await self._delete(SiteReview, review_id, user_id, "site")

    async def list_site_reviews(self, category: Optional[str] = None) -> Sequence[SiteReview]:
        """Site reviews newest first, optionally narrowed to one category."""
        stmt = select(SiteReview).options(selectinload(SiteReview.user))
        if category:
            stmt = stmt.where(SiteReview.category == category)
        stmt = stmt.order_by(SiteReview.created_at.desc())
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        return result.scalars().all()

    async def add_site_review(self, user_id: UUID, request: CreateSiteReviewRequest) -> SiteReview:
        """Leave feedback about the platform. A user may leave several."""
        review = SiteReview(
            user_id=user_id,
            rating=request.rating,
            comment=request.comment,
            category=request.category.value,
        )
        self.db.add(review)
        await commit(self.db)

        metrics_collector.record_review_created("site")
        logger.info("Site review created", extra={"review_id": str(review.id), "category": review.category})
        return await self._load_with_user(SiteReview, review.id)
