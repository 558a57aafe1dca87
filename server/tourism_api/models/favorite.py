"""Favorite (bookmark) model definitions."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base, utcnow

if TYPE_CHECKING:
    from .car import Car
    from .tour import Tour
    from .user import User


class FavoriteTour(Base):
    """Tour bookmarked by a user."""

    __tablename__ = "favorite_tours"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

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

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("user_id", "tour_id", name="uq_favorite_tour_user_tour"),
    )

    user: Mapped["User"] = relationship("User", back_populates="favorite_tours")
    tour: Mapped["Tour"] = relationship("Tour", back_populates="favorites")

    def __repr__(self) -> str:
        return f"<FavoriteTour(id={self.id}, user_id={self.user_id}, tour_id={self.tour_id})>"


class FavoriteCar(Base):
    """Car bookmarked by a user."""

    __tablename__ = "favorite_cars"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

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

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("user_id", "car_id", name="uq_favorite_car_user_car"),
    )

    user: Mapped["User"] = relationship("User", back_populates="favorite_cars")
    car: Mapped["Car"] = relationship("Car", back_populates="favorites")

    def __repr__(self) -> str:
        return f"<FavoriteCar(id={self.id}, user_id={self.user_id}, car_id={self.car_id})>"
