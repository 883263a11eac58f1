"""HTTP API routes: template generation, publishing and health."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from notionify import __version__
from notionify.config import Settings, get_settings
from notionify.dependencies import (
    client_address,
    get_generate_limiter,
    get_health_service,
    get_publish_limiter,
    get_publish_service,
    get_template_service,
)
from notionify.exceptions import ServiceError
from notionify.models import (
    TEMPLATE_TYPES,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
    PublishRequest,
    PublishResponse,
)
from notionify.rate_limiter import FixedWindowRateLimiter
from notionify.services.health_service import HealthService
from notionify.services.publish_service import PublishService, prepare_content
from notionify.services.template_service import TemplateService
from notionify.validation import validate_environment, validate_prompt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

_STARTED_AT = time.monotonic()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    408: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/generate",
    response_model=GenerateResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def generate_template(
    request: Request,
    template_service: Annotated[TemplateService, Depends(get_template_service)],
    limiter: Annotated[FixedWindowRateLimiter, Depends(get_generate_limiter)],
):
    """Rate check, validate the prompt, then run the generation pipeline."""

    client = client_address(request)
    decision = limiter.check(client)
    if not decision.allowed:
        logger.info("Generation rate limited", extra={"client": client})
        return _error(status.HTTP_429_TOO_MANY_REQUESTS, decision.error)

    try:
        payload = GenerateRequest.model_validate_json(await request.body())
    except ValidationError as exc:
        if any(error["loc"][:1] == ("template_type",) for error in exc.errors()):
            return _error(
                status.HTTP_400_BAD_REQUEST,
                f"Template type must be one of: {', '.join(TEMPLATE_TYPES)}",
            )
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    validation = validate_prompt(payload.prompt)
    if not validation.is_valid:
        logger.info(
            "Prompt rejected",
            extra={"client": client, "errors": validation.errors},
        )
        return _error(status.HTTP_400_BAD_REQUEST, "; ".join(validation.errors))

    try:
        result = await template_service.generate(
            payload.prompt.strip(), template_type=payload.template_type
        )
    except ServiceError as exc:
        return _error(exc.status_code, exc.message)

    logger.info(
        "Template generated",
        extra={
            "client": client,
            "sections": len(result.template.sections),
            "properties": len(result.template.properties),
        },
    )
    return GenerateResponse(
        template=result.template,
        warnings=[*validation.warnings, *result.warnings],
    )


@router.post(
    "/save",
    response_model=PublishResponse,
    responses={401: {"model": ErrorResponse}, **_ERROR_RESPONSES},
)
async def publish_template(
    request: Request,
    publish_service: Annotated[PublishService, Depends(get_publish_service)],
    limiter: Annotated[FixedWindowRateLimiter, Depends(get_publish_limiter)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Publish content as a public gist and return its URL."""

    client = client_address(request)
    decision = limiter.check(client)
    if not decision.allowed:
        logger.info("Publish rate limited", extra={"client": client})
        return _error(status.HTTP_429_TOO_MANY_REQUESTS, decision.error)

    try:
        payload = PublishRequest.model_validate_json(await request.body())
    except ValueError:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    try:
        content = prepare_content(payload.content, max_bytes=settings.max_publish_bytes)
        gist = await publish_service.publish(content)
    except ServiceError as exc:
        return _error(exc.status_code, exc.message)

    return PublishResponse(url=gist.url, id=gist.id)


@router.get("/health", response_model=HealthResponse)
async def health(
    health_service: Annotated[HealthService, Depends(get_health_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Report configuration validity and upstream reachability."""

    environment = validate_environment(settings)
    if environment.errors or environment.warnings:
        logger.warning(
            "Environment check reported problems",
            extra={"errors": environment.errors, "warnings": environment.warnings},
        )

    dependencies = await health_service.check_dependencies()
    healthy = environment.is_valid and all(dependencies.values())

    return HealthResponse(
        status="healthy" if healthy else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
        version=__version__,
        environment={"is_valid": environment.is_valid},
        dependencies=dependencies,
    )
