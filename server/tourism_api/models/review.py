"""Tour, car and site review model definitions."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base, utcnow

if TYPE_CHECKING:
    from .car import Car
    from .tour import Tour
    from .user import User


class SiteReviewCategory(str, Enum):
    """What a site review is about."""
    SERVICE = "service"
    WEBSITE = "website"
    SUPPORT = "support"


class TourReview(Base):
    """A user's rating of a tour. One per (user, tour)."""

    __tablename__ = "tour_reviews"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Foreign keys
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    tour_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("tours.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Review details
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_tour_review_rating_range"),
        UniqueConstraint("user_id", "tour_id", name="uq_tour_review_user_tour"),
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="tour_reviews")
    tour: Mapped["Tour"] = relationship("Tour", back_populates="reviews")

    def __repr__(self) -> str:
        return f"<TourReview(id={self.id}, tour_id={self.tour_id}, user_id={self.user_id}, rating={self.rating})>"


class CarReview(Base):
    """A user's rating of a car. One per (user, car)."""

    __tablename__ = "car_reviews"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Foreign keys
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    car_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("cars.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Review details
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_car_review_rating_range"),
        UniqueConstraint("user_id", "car_id", name="uq_car_review_user_car"),
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="car_reviews")
    car: Mapped["Car"] = relationship("Car", back_populates="reviews")

    def __repr__(self) -> str:
        return f"<CarReview(id={self.id}, car_id={self.car_id}, user_id={self.user_id}, rating={self.rating})>"


class SiteReview(Base):
    """Feedback about the platform itself."""

    __tablename__ = "site_reviews"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Foreign key to author
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Review details
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[SiteReviewCategory] = mapped_column(String(20), nullable=False, index=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
        index=True
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_site_review_rating_range"),
        CheckConstraint(
            "category IN ('service', 'website', 'support')",
            name="ck_site_review_category"
        ),
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="site_reviews")

    def __repr__(self) -> str:
        return f"<SiteReview(id={self.id}, category='{self.category}', rating={self.rating})>"
