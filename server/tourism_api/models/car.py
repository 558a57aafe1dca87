"""Car model definition."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import JSON, CheckConstraint, DateTime, Float, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base, utcnow

if TYPE_CHECKING:
    from .favorite import FavoriteCar
    from .review import CarReview
    from .tour import Tour


class Car(Base):
    """Rental car, optionally attached to a tour."""

    __tablename__ = "cars"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Optional owning tour; detached when the tour is removed
    tour_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("tours.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    # Car details
    category: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    brand: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    model: Mapped[str] = mapped_column(String(128), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    drive: Mapped[str] = mapped_column(String(64), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    places: Mapped[int] = mapped_column(Integer, nullable=False)
    transmission: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    fuel_type: Mapped[str] = mapped_column(String(64), nullable=False)
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
        CheckConstraint("price >= 0", name="ck_car_price_non_negative"),
        CheckConstraint("capacity > 0", name="ck_car_capacity_positive"),
        CheckConstraint("places > 0", name="ck_car_places_positive"),
    )

    # Relationships
    tour: Mapped["Tour | None"] = relationship("Tour", back_populates="cars")
    reviews: Mapped[list["CarReview"]] = relationship(
        "CarReview",
        back_populates="car",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CarReview.created_at.desc()"
    )
    favorites: Mapped[list["FavoriteCar"]] = relationship(
        "FavoriteCar",
        back_populates="car",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Car(id={self.id}, brand='{self.brand}', model='{self.model}', year={self.year})>"
