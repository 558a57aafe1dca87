"""User model definition."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base, utcnow

if TYPE_CHECKING:
    from .favorite import FavoriteCar, FavoriteTour
    from .review import CarReview, SiteReview, TourReview


class User(Base):
    """Registered account. Only the bcrypt hash of the password is stored."""

    __tablename__ = "users"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Credentials and profile
    username: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    __table_args__ = (
        CheckConstraint("length(username) > 0", name="ck_user_username_not_empty"),
        CheckConstraint("length(email) > 0", name="ck_user_email_not_empty"),
    )

    # Relationships
    tour_reviews: Mapped[list["TourReview"]] = relationship(
        "TourReview",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    car_reviews: Mapped[list["CarReview"]] = relationship(
        "CarReview",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    site_reviews: Mapped[list["SiteReview"]] = relationship(
        "SiteReview",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    favorite_tours: Mapped[list["FavoriteTour"]] = relationship(
        "FavoriteTour",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    favorite_cars: Mapped[list["FavoriteCar"]] = relationship(
        "FavoriteCar",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', email='{self.email}')>"
