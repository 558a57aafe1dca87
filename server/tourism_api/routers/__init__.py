"""FastAPI routers package."""

from fastapi import APIRouter, Depends

from ..core.dependencies import get_locale
from .auth import router as auth_router
from .cars import router as cars_router
from .favorites import router as favorites_router
from .health import router as health_router
from .itinerary import router as itinerary_router
from .metrics import router as metrics_router
from .reviews import router as reviews_router
from .tours import router as tours_router

API_PREFIX = "/{lang}/api/v1"

# Localized resource routes, mounted under API_PREFIX
api_router = APIRouter(prefix=API_PREFIX, dependencies=[Depends(get_locale)])
api_router.include_router(auth_router)
api_router.include_router(tours_router)
api_router.include_router(cars_router)
api_router.include_router(reviews_router)
api_router.include_router(favorites_router)
api_router.include_router(itinerary_router)

__all__ = [
    "API_PREFIX",
    "api_router",
    "health_router",
    "metrics_router",
]
