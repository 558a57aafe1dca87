"""Tour itinerary (days and day items) model definitions."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import JSON, CheckConstraint, DateTime, Float, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base, utcnow

if TYPE_CHECKING:
    from .tour import Tour


class TourDay(Base):
    """One day of a tour program, ordered by day number."""

    __tablename__ = "tour_days"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    tour_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("tours.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    __table_args__ = (
        CheckConstraint("day_number >= 1", name="ck_tour_day_number_positive"),
    )

    tour: Mapped["Tour"] = relationship("Tour", back_populates="days")
    items: Mapped[list["TourDayItem"]] = relationship(
        "TourDayItem",
        back_populates="day",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TourDayItem.created_at"
    )

    def __repr__(self) -> str:
        return f"<TourDay(id={self.id}, tour_id={self.tour_id}, day_number={self.day_number})>"


class TourDayItem(Base):
    """Activity within a tour day, ordered by creation."""

    __tablename__ = "tour_day_items"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    day_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("tour_days.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    point_start: Mapped[str | None] = mapped_column(String(255), nullable=True)
    point_end: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    duration: Mapped[str | None] = mapped_column(String(64), nullable=True)
    complexity: Mapped[str | None] = mapped_column(String(64), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
        index=True
    )

    day: Mapped["TourDay"] = relationship("TourDay", back_populates="items")

    def __repr__(self) -> str:
        return f"<TourDayItem(id={self.id}, day_id={self.day_id}, title='{self.title}')>"
