from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from happyhour.db.repository import VenueRepository, get_venue_repository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthcheck() -> dict[str, str]:
    """
    Basic liveness probe - returns OK if the application is running.
    """
    return {"status": "ok"}


@router.get("/health")
async def health(repository: VenueRepository = Depends(get_venue_repository)) -> JSONResponse:
    """
    Checks the venue source can be read.
    Returns 200 if it can, 503 otherwise.
    """
    health_status: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {},
    }

    try:
        venues = repository.fetch_all()
        health_status["checks"]["venues"] = {
            "status": "healthy",
            "message": f"{len(venues)} venue(s) available",
        }
    except Exception as e:
        logger.error(f"Venue source health check failed: {e}")
        health_status["checks"]["venues"] = {
            "status": "unhealthy",
            "message": f"Venue source failed: {str(e)}",
        }
        health_status["status"] = "unhealthy"
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=health_status,
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
