"""Dependency providers for the FastAPI application."""

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from notionify.config import Settings, get_settings
from notionify.rate_limiter import FixedWindowRateLimiter
from notionify.services.health_service import HealthService
from notionify.services.inference_service import InferenceService
from notionify.services.publish_service import PublishService
from notionify.services.template_service import TemplateService


async def get_http_client(connection: HTTPConnection) -> httpx.AsyncClient:
    """Retrieve the shared AsyncClient from application state."""

    return connection.app.state.http_client  # type: ignore[return-value]


async def get_generate_limiter(connection: HTTPConnection) -> FixedWindowRateLimiter:
    return connection.app.state.generate_limiter  # type: ignore[return-value]


async def get_publish_limiter(connection: HTTPConnection) -> FixedWindowRateLimiter:
    return connection.app.state.publish_limiter  # type: ignore[return-value]


async def get_inference_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> InferenceService:
    return InferenceService(client=client, settings=settings)


async def get_template_service(
    inference: InferenceService = Depends(get_inference_service),
) -> TemplateService:
    """Dependency provider for the generation pipeline."""

    return TemplateService(inference=inference)


async def get_publish_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> PublishService:
    return PublishService(client=client, settings=settings)


async def get_health_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> HealthService:
    return HealthService(client=client, settings=settings)


def client_address(connection: HTTPConnection) -> str:
    """Best-effort client address used as the rate limiting key."""

    forwarded = connection.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop

    real_ip = connection.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()

    if connection.client is not None:
        return connection.client.host
    return "unknown"
