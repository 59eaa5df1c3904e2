"""Health & Readiness Probes - liveness and readiness endpoints.

Invariants:
    - GET / and GET /api/v1/health/ always return 200 if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 if MongoDB does not answer a ping (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from expense_tracker.core.errors import error_envelope
from expense_tracker.schemas.envelope import Envelope

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", response_model=Envelope[dict])
async def ping():
    """Show the status of the server."""
    return Envelope(code=200, data={"status": "up"}, message="Server is up and running")


@router.get("/api/v1/health/", response_model=Envelope[dict])
async def health_check():
    """Basic liveness probe."""
    return Envelope(
        code=200,
        data={"status": "healthy", "service": "expense-tracker-api"},
        message="healthy",
    )


@router.get("/api/v1/health/ready", response_model=Envelope[dict])
async def readiness_check(request: Request):
    """Readiness probe - includes database connectivity."""
    manager = getattr(request.app.state, "connection_manager", None)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=error_envelope(
                status.HTTP_503_SERVICE_UNAVAILABLE, "DB Connection Error",
            ),
        )
    return Envelope(
        code=200, data={"database": "healthy"}, message="DB Connected",
    )
