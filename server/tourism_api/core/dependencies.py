"""FastAPI dependencies for locale, authentication and request context."""

from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, Path

from .config import settings
from .exceptions import AuthenticationError, NotFoundError
from .i18n import is_supported_locale
from .tokens import InvalidTokenError, TokenService


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as proven by a verified token."""

    user_id: UUID
    email: str


@dataclass(frozen=True)
class RequestContext:
    """Per-request state handed to route handlers."""

    locale: str
    identity: Optional[Identity] = None

    @property
    def user_id(self) -> UUID:
        """Id of the authenticated caller; only valid on authenticated routes."""
        if self.identity is None:
            raise AuthenticationError()
        return self.identity.user_id


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    """Token service built once from the process settings."""
    return TokenService(
        secret=settings.jwt_secret,
        expires_in=timedelta(days=settings.jwt_expires_days),
    )


async def get_locale(lang: str = Path(..., description="Response language: ru, en or ky")) -> str:
    """
    Validate the language path segment.

    Raises:
        NotFoundError: If the language is not supported
    """
    if not is_supported_locale(lang):
        raise NotFoundError(resource_type="language", resource_id=lang, message_key="common.invalid_language")
    return lang


async def get_current_identity(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    token_service: TokenService = Depends(get_token_service),
) -> Identity:
    """
    Authentication dependency that validates Bearer tokens.

    Args:
        authorization: Authorization header with Bearer token
        token_service: Verifier for the token

    Returns:
        Identity: Caller identity from the validated token

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if not authorization:
        raise AuthenticationError()

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise AuthenticationError()

    try:
        claims = token_service.verify(token)
        user_id = UUID(claims.user_id)
    except (InvalidTokenError, ValueError):
        raise AuthenticationError(message_key="auth.invalid_token")

    return Identity(user_id=user_id, email=claims.email)


async def get_context(locale: str = Depends(get_locale)) -> RequestContext:
    """Context for public routes."""
    return RequestContext(locale=locale)


async def get_auth_context(
    locale: str = Depends(get_locale),
    identity: Identity = Depends(get_current_identity),
) -> RequestContext:
    """Context for routes that require an authenticated caller."""
    return RequestContext(locale=locale, identity=identity)


PublicContext = Depends(get_context)
AuthContext = Depends(get_auth_context)
