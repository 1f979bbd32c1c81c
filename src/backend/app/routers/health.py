"""Health check endpoints for the organization user API.

Both endpoints are unauthenticated and mounted at root (no /api prefix).
Used by Kubernetes liveness and readiness checks.
"""

import importlib.metadata

import httpx
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check: returns 200 if the application process is running."""
    version = importlib.metadata.version("org-user-api")
    return {"status": "ok", "version": version}


@router.get("/health/ready")
async def health_ready(request: Request) -> JSONResponse:
    """Readiness check: 200 if the organization management service answers, 503 otherwise."""
    try:
        response = await request.app.state.http_client.get(
            settings.ORG_MGT_SERVICE_URL, timeout=settings.EXTERNAL_API_TIMEOUT_SECONDS
        )
    except httpx.HTTPError as exc:
        return JSONResponse(status_code=503, content={"status": "unavailable", "detail": str(exc)})

    if response.is_server_error:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unavailable",
                "detail": f"upstream returned {response.status_code}",
            },
        )
    return JSONResponse(status_code=200, content={"status": "ok"})
