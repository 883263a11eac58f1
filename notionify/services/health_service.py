"""Reachability probes for the upstream services."""

from __future__ import annotations

import asyncio
import logging

import httpx

from notionify.config import Settings

logger = logging.getLogger(__name__)


class HealthService:
    _user_agent = "Notionify/1.0"

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def check_dependencies(self) -> dict[str, bool]:
        """Probe both upstreams concurrently."""

        hugging_face, github = await asyncio.gather(
            self._probe(self._settings.hf_status_url),
            self._probe(f"{self._settings.github_api_url.rstrip('/')}/zen"),
        )
        return {"hugging_face": hugging_face, "github": github}

    async def _probe(self, url: str) -> bool:
        try:
            response = await self._client.get(
                url,
                headers={"User-Agent": self._user_agent},
                timeout=self._settings.health_timeout,
            )
        except httpx.HTTPError as exc:
            logger.warning("Upstream probe failed", extra={"url": url, "error": repr(exc)})
            return False
        return response.is_success
