"""Account registration, login and profile lookups."""

import asyncio
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError
from ..core.observability import metrics_collector
from ..core.security import hash_password, verify_password
from ..core.tokens import TokenClaims, TokenService
from ..models.favorite import FavoriteCar, FavoriteTour
from ..models.review import CarReview, TourReview
from ..models.user import User
from ..schemas.auth import LoginRequest, RegisterRequest, UserProfile
from .persistence import commit

logger = logging.getLogger(__name__)


class AuthService:
    """Service for account-related operations."""

    def __init__(self, db: AsyncSession, token_service: TokenService, bcrypt_rounds: Optional[int] = None):
        self.db = db
        self.token_service = token_service
        self.bcrypt_rounds = bcrypt_rounds

    def issue_token(self, user: User) -> str:
        return self.token_service.issue(TokenClaims(user_id=str(user.id), email=user.email))

    async def register(self, request: RegisterRequest) -> tuple[User, str]:
        """
        Create an account and sign a token for it.

        Args:
            request: Registration data

        Returns:
            The new user and its bearer token

        Raises:
            ConflictError: If the email or username is taken
        """
        stmt = select(User.id).where(
            or_(User.email == request.email, User.username == request.username)
        )
        existing = await self.db.execute(stmt)
        if existing.first() is not None:
            logger.info("Registration rejected - account exists", extra={"email": request.email})
            raise ConflictError(message_key="auth.user_exists")

        # bcrypt is CPU bound; keep it off the event loop
        password_hash = await asyncio.to_thread(hash_password, request.password, self.bcrypt_rounds)

        user = User(
            username=request.username,
            email=request.email,
            password_hash=password_hash,
        )
        self.db.add(user)
        await commit(self.db, conflict_key="auth.user_exists")

        metrics_collector.record_user_registered()
        logger.info("User registered", extra={"user_id": str(user.id)})

        return user, self.issue_token(user)

    async def login(self, request: LoginRequest) -> tuple[User, str]:
        """
        Check credentials and sign a token.

        Raises:
            NotFoundError: If no account has the email
            AuthenticationError: If the password does not match
        """
        result = await self.db.execute(select(User).where(User.email == request.email))
        user = result.scalar_one_or_none()
        if user is None:
            metrics_collector.record_login_failure("unknown_email")
            raise NotFoundError(resource_type="user", message_key="auth.user_not_found")

        matches = await asyncio.to_thread(verify_password, request.password, user.password_hash)
        if not matches:
            metrics_collector.record_login_failure("wrong_password")
            logger.info("Login rejected - wrong password", extra={"user_id": str(user.id)})
            raise AuthenticationError(message_key="auth.invalid_password")

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return user, self.issue_token(user)

    async def _count(self, model, user_id: UUID) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(model).where(model.user_id == user_id)
        )
        return result.scalar_one()

    async def get_profile(self, user_id: UUID) -> UserProfile:
        """
        Account of the caller with activity counters.

        Raises:
            NotFoundError: If the account no longer exists
        """
        user = await self.db.get(User, user_id)
        if user is None:
            raise NotFoundError(resource_type="user", resource_id=str(user_id), message_key="auth.user_not_found")

        return UserProfile(
            id=user.id,
            username=user.username,
            email=user.email,
            avatar=user.avatar,
            created_at=user.created_at,
            favorite_tours_count=await self._count(FavoriteTour, user_id),
            favorite_cars_count=await self._count(FavoriteCar, user_id),
            tour_reviews_count=await self._count(TourReview, user_id),
            car_reviews_count=await self._count(CarReview, user_id),
        )
