"""Adapter for the Hugging Face text-generation inference API."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx

from notionify.config import Settings
from notionify.exceptions import (
    ConfigurationMissingError,
    UpstreamRateLimitedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


class InferenceService:
    """Single-attempt, time-bounded calls to a hosted text-generation model."""

    _user_agent = "Notionify/1.0"

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    @property
    def endpoint(self) -> str:
        return f"{self._settings.hf_api_url.rstrip('/')}/{self._settings.hf_model}"

    async def complete(self, prompt: str) -> str:
        """Return the raw completion text for ``prompt``."""

        if not self._settings.hf_api_key:
            logger.error("Inference API key is not configured")
            raise ConfigurationMissingError()

        payload = {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": self._settings.hf_max_new_tokens,
                "temperature": self._settings.hf_temperature,
                "do_sample": True,
                "return_full_text": False,
            },
            "options": {"wait_for_model": True},
        }

        headers = {
            "Authorization": f"Bearer {self._settings.hf_api_key}",
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }

        try:
            # wait_for bounds the whole exchange and cancels it on expiry.
            response = await asyncio.wait_for(
                self._client.post(
                    self.endpoint,
                    headers=headers,
                    json=payload,
                    timeout=self._settings.inference_timeout,
                ),
                timeout=self._settings.inference_timeout,
            )
            response.raise_for_status()
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning(
                "Inference request timed out",
                extra={"model": self._settings.hf_model},
                exc_info=exc,
            )
            raise UpstreamTimeoutError() from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Inference request failed",
                extra={
                    "model": self._settings.hf_model,
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text,
                },
            )
            if exc.response.status_code == 429:
                raise UpstreamRateLimitedError() from exc
            raise UpstreamUnavailableError() from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected inference HTTP error")
            raise UpstreamUnavailableError() from exc

        try:
            data: Any = response.json()
        except ValueError:
            data = response.text

        return self._generated_text(data)

    def _generated_text(self, data: Any) -> str:
        """Normalise the provider's reply shapes to a single string."""

        if isinstance(data, list) and data and isinstance(data[0], dict):
            generated = data[0].get("generated_text")
            if isinstance(generated, str) and generated:
                return generated
        if isinstance(data, str):
            return data
        if isinstance(data, dict) and data.get("error"):
            logger.error("Inference provider reported an error", extra={"raw_response": data})
            raise UpstreamUnavailableError("AI service error. Please try again.")
        return json.dumps(data)
