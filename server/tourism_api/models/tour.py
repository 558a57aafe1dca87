"""Tour model definition."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import JSON, CheckConstraint, DateTime, Float, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base, utcnow

if TYPE_CHECKING:
    from .car import Car
    from .favorite import FavoriteTour
    from .itinerary import TourDay
    from .review import TourReview


class Tour(Base):
    """Tour offered in the catalog, with its cars, reviews and day-by-day program."""

    __tablename__ = "tours"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Tour information
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    date: Mapped[str] = mapped_column(String(64), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    max_people: Mapped[int] = mapped_column(Integer, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

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
        CheckConstraint("price >= 0", name="ck_tour_price_non_negative"),
        CheckConstraint("duration > 0", name="ck_tour_duration_positive"),
        CheckConstraint("max_people > 0", name="ck_tour_max_people_positive"),
    )

    # Relationships
    cars: Mapped[list["Car"]] = relationship(
        "Car",
        back_populates="tour",
        passive_deletes=True
    )
    reviews: Mapped[list["TourReview"]] = relationship(
        "TourReview",
        back_populates="tour",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TourReview.created_at.desc()"
    )
    favorites: Mapped[list["FavoriteTour"]] = relationship(
        "FavoriteTour",
        back_populates="tour",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    days: Mapped[list["TourDay"]] = relationship(
        "TourDay",
        back_populates="tour",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TourDay.day_number"
    )

    def __repr__(self) -> str:
        return f"<Tour(id={self.id}, name='{self.name}', city='{self.city}', price={self.price})>"
