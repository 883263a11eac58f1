"""Adapter for publishing content as a public GitHub Gist."""

from __future__ import annotations

import asyncio
import json
import logging
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Any

import httpx

from notionify.config import Settings
from notionify.exceptions import (
    InvalidContentError,
    PublishAuthError,
    PublishQuotaError,
    PublishResponseError,
    PublishTimeoutError,
    PublishUnavailableError,
)
from notionify.models import PublishedGist
from notionify.validation import sanitize_content

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def prepare_content(content: Any, max_bytes: int) -> str:
    """Serialise, size-check and sanitise content before it leaves the service."""

    if content is None or content == "":
        raise InvalidContentError("Content is required")

    if isinstance(content, str):
        text = content
    elif isinstance(content, (dict, list)):
        text = json.dumps(content, indent=2, ensure_ascii=False)
    else:
        raise InvalidContentError("Content must be a string or object")

    if len(text.encode("utf-8")) > max_bytes:
        raise InvalidContentError(f"Content too large (max {max_bytes} bytes)")

    if text.lstrip().startswith(("{", "[")):
        try:
            json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise InvalidContentError("Invalid JSON format") from exc

    sanitized = sanitize_content(text)
    if not sanitized:
        raise InvalidContentError("Content is required")
    return sanitized


def gist_filename() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(6))
    return f"notion-template-{int(time.time() * 1000)}-{suffix}.json"


class PublishService:
    """Wrapper around GitHub's create-gist endpoint."""

    _user_agent = "Notionify/1.0"

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    @property
    def endpoint(self) -> str:
        return f"{self._settings.github_api_url.rstrip('/')}/gists"

    async def publish(self, content: str) -> PublishedGist:
        """Create a public gist holding ``content`` and return its URL."""

        if not self._settings.github_token:
            logger.error("Gist token is not configured")
            raise PublishUnavailableError()

        payload = {
            "description": f"Notionify Template - {datetime.now(timezone.utc).isoformat()}",
            "public": True,
            "files": {gist_filename(): {"content": content}},
        }

        headers = {
            "Authorization": f"Bearer {self._settings.github_token}",
            "Accept": "application/vnd.github+json",
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }

        try:
            response = await asyncio.wait_for(
                self._client.post(
                    self.endpoint,
                    headers=headers,
                    json=payload,
                    timeout=self._settings.publish_timeout,
                ),
                timeout=self._settings.publish_timeout,
            )
            response.raise_for_status()
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("Gist creation timed out", exc_info=exc)
            raise PublishTimeoutError() from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.error(
                "Gist creation failed",
                extra={"status_code": status_code, "response_text": exc.response.text},
            )
            if status_code == 401:
                raise PublishAuthError() from exc
            if status_code == 403:
                raise PublishQuotaError() from exc
            raise PublishUnavailableError() from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected gist HTTP error")
            raise PublishUnavailableError() from exc

        try:
            data = response.json()
            url = data["html_url"]
            gist_id = data["id"]
        except (ValueError, KeyError, TypeError) as exc:
            logger.error("Malformed gist response", extra={"raw_response": response.text})
            raise PublishResponseError() from exc

        if not url:
            logger.error("Gist response has no URL", extra={"raw_response": data})
            raise PublishResponseError()

        logger.info("Gist created", extra={"gist_id": gist_id})
        return PublishedGist(url=url, id=str(gist_id))
