"""Health check router."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.database import get_db
from ..schemas.health import HealthResponse, HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db)) -> JSONResponse:
    """
    Health check endpoint.

    Reports the service status and whether the database answers a trivial
    query. Responds 503 when it does not.
    """
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except Exception as e:
        logger.warning("Health check database probe failed", extra={"error": str(e)})
        database = "unavailable"

    response_data = HealthResponse(
        status=HealthStatus.HEALTHY if database == "ok" else HealthStatus.DEGRADED,
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        database=database,
    )

    logger.debug(
        "Health check requested",
        extra={
            "status": response_data.status,
            "timestamp": response_data.timestamp.isoformat()
        }
    )

    return JSONResponse(
        status_code=200 if database == "ok" else 503,
        content=response_data.model_dump(mode="json")
    )
