"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from notionify import __version__
from notionify.config import Settings, get_settings
from notionify.logging import configure_logging
from notionify.models import ErrorResponse
from notionify.rate_limiter import FixedWindowRateLimiter, RateLimitConfig
from notionify.routes import router

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-XSS-Protection": "1; mode=block",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create application resources during startup and clean up on shutdown."""

    async with httpx.AsyncClient() as client:
        app.state.http_client = client
        yield
        del app.state.http_client


def create_app() -> FastAPI:
    """Application factory."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Notionify",
        description="Generate Notion page templates from a short description.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.generate_limiter = FixedWindowRateLimiter(
        RateLimitConfig(
            window_seconds=settings.generate_rate_window,
            max_requests=settings.generate_rate_limit,
        )
    )
    app.state.publish_limiter = FixedWindowRateLimiter(
        RateLimitConfig(
            window_seconds=settings.publish_rate_window,
            max_requests=settings.publish_rate_limit,
            message="Save rate limit exceeded. Please try again later.",
        )
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error", extra={"method": request.method, "path": request.url.path}
            )
            response = JSONResponse(
                status_code=500,
                content=ErrorResponse(error="Internal server error").model_dump(),
            )
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        logger.info(
            "Request handled",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/version")
    async def version(settings: Settings = Depends(get_settings)) -> dict[str, str]:
        return {"version": __version__, "environment": settings.environment}

    app.include_router(router)

    return app


app = create_app()
