"""Authentication router: registration, login and the caller's profile."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.database import get_db
from ..core.dependencies import AuthContext, PublicContext, RequestContext, get_token_service
from ..core.exceptions import ApiError, InternalServerError
from ..core.i18n import translate
from ..core.tokens import TokenService
from ..schemas.auth import LoginRequest, RegisterRequest, User
from ..schemas.common import envelope
from ..services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(db, token_service, bcrypt_rounds=settings.bcrypt_rounds)


@router.post("/register", status_code=201)
async def register(
    payload: RegisterRequest,
    ctx: RequestContext = PublicContext,
    auth_service: AuthService = Depends(get_auth_service)
) -> JSONResponse:
    """Create an account. Responds with the user and a bearer token."""
    try:
        user, token = await auth_service.register(payload)
        return envelope(
            status_code=201,
            message=translate("auth.register_success", ctx.locale),
            user=User.model_validate(user),
            token=token,
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error during registration",
            extra={"username": payload.username, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="auth.register_error")


@router.post("/login")
async def login(
    payload: LoginRequest,
    ctx: RequestContext = PublicContext,
    auth_service: AuthService = Depends(get_auth_service)
) -> JSONResponse:
    """Exchange email and password for a bearer token."""
    try:
        user, token = await auth_service.login(payload)
        return envelope(
            message=translate("auth.login_success", ctx.locale),
            user=User.model_validate(user),
            token=token,
        )

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error during login",
            extra={"error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="auth.login_error")


@router.get("/me")
async def get_me(
    ctx: RequestContext = AuthContext,
    auth_service: AuthService = Depends(get_auth_service)
) -> JSONResponse:
    """Profile of the authenticated caller with activity counters."""
    try:
        profile = await auth_service.get_profile(ctx.user_id)
        return envelope(user=profile)

    except ApiError:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error loading profile",
            extra={"user_id": str(ctx.user_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(message_key="auth.getme_error")
