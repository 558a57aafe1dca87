"""Issuing and verifying signed bearer tokens."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt import PyJWTError

logger = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Raised for any token that cannot be trusted, whatever the reason."""


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a bearer token."""

    user_id: str
    email: str
    expires_at: Optional[datetime] = None


class TokenService:
    """
    Stateless JWT issuer and verifier.

    The signing secret is fixed at construction; the service never reads the
    environment itself.
    """

    def __init__(
        self,
        secret: str,
        expires_in: timedelta = timedelta(days=30),
        algorithm: str = "HS256",
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm

    def issue(self, claims: TokenClaims) -> str:
        """
        Sign a token for the given identity.

        Args:
            claims: User id and email to embed

        Returns:
            str: Encoded JWT valid for ``expires_in``
        """
        now = datetime.now(timezone.utc)
        payload = {
            "userId": claims.user_id,
            "email": claims.email,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Check signature and expiry of a token.

        Args:
            token: Encoded JWT

        Returns:
            TokenClaims: Verified identity with its expiry

        Raises:
            InvalidTokenError: If the token is malformed, expired, forged or
                lacks the identity claims
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except PyJWTError as e:
            logger.debug("Token rejected", extra={"reason": type(e).__name__})
            raise InvalidTokenError() from e

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, str) or not isinstance(email, str):
            logger.debug("Token rejected", extra={"reason": "missing identity claims"})
            raise InvalidTokenError()

        return TokenClaims(
            user_id=user_id,
            email=email,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
