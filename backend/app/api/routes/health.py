"""Service Status — liveness and database readiness for the tracker API.

Invariants:
    - GET /api/health answers 200 while the process serves requests
    - GET /api/health/ready answers 503 in the uniform error envelope when the
      store cannot run a trivial query, or when no store handle is attached
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.api.error_handlers import error_body

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
async def liveness(request: Request):
    app = request.app
    return {"status": "healthy", "service": app.title, "version": app.version}


@router.get("/ready")
async def readiness(request: Request):
    """Report whether users and exercises can currently be read and written."""
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None or not await db_manager.health_check():
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=error_body(503, "Database unavailable"),
        )
    return {"status": "ready", "database": "reachable"}
