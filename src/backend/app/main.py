"""Organization user API FastAPI application factory.

Entry point: uvicorn app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.errors import APIError
from app.middleware import REQUEST_ID_HEADER, RequestIDMiddleware, get_request_id
from app.routers import health, organizations


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    app.state.http_client = httpx.AsyncClient(timeout=settings.EXTERNAL_API_TIMEOUT_SECONDS)

    yield

    await app.state.http_client.aclose()


app = FastAPI(title="Organization User API", lifespan=lifespan)

app.add_middleware(RequestIDMiddleware)


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status,
        content=exc.error_response.model_dump(exclude_none=True),
        headers={REQUEST_ID_HEADER: get_request_id()},
    )


app.include_router(health.router)
app.include_router(organizations.router)
