import asyncio
import json

import httpx
import pytest

from notionify.config import Settings
from notionify.exceptions import (
    ConfigurationMissingError,
    UpstreamRateLimitedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from notionify.services.inference_service import InferenceService


async def _complete(settings: Settings, handler) -> str:
    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = InferenceService(client, settings)
        return await service.complete("make me a template")


@pytest.mark.asyncio
async def test_inference_success_list_payload(settings: Settings) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content.decode())
        assert request.url.path.endswith(f"/models/{settings.hf_model}")
        assert request.headers["Authorization"] == f"Bearer {settings.hf_api_key}"
        assert payload["inputs"] == "make me a template"
        assert payload["parameters"]["return_full_text"] is False
        assert payload["options"]["wait_for_model"] is True
        return httpx.Response(200, json=[{"generated_text": '{"title": "T"}'}])

    assert await _complete(settings, handler) == '{"title": "T"}'


@pytest.mark.asyncio
async def test_inference_bare_string_payload(settings: Settings) -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json="plain completion")

    assert await _complete(settings, handler) == "plain completion"


@pytest.mark.asyncio
async def test_inference_other_object_is_serialised(settings: Settings) -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"title": "Direct", "sections": []})

    result = await _complete(settings, handler)

    assert json.loads(result) == {"title": "Direct", "sections": []}


@pytest.mark.asyncio
async def test_inference_non_json_body_is_returned_as_text(settings: Settings) -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="not json at all")

    assert await _complete(settings, handler) == "not json at all"


@pytest.mark.asyncio
async def test_inference_error_payload(settings: Settings) -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error": "Model is overloaded"})

    with pytest.raises(UpstreamUnavailableError) as exc:
        await _complete(settings, handler)

    assert exc.value.message == "AI service error. Please try again."
    assert exc.value.status_code == 503


@pytest.mark.asyncio
async def test_inference_upstream_rate_limited(settings: Settings) -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "slow down"})

    with pytest.raises(UpstreamRateLimitedError) as exc:
        await _complete(settings, handler)

    assert exc.value.status_code == 503
    assert "busy" in exc.value.message


@pytest.mark.asyncio
async def test_inference_upstream_error_hides_body(settings: Settings) -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "secret internal trace"})

    with pytest.raises(UpstreamUnavailableError) as exc:
        await _complete(settings, handler)

    assert exc.value.message == "AI service temporarily unavailable"
    assert "secret" not in str(exc.value)


@pytest.mark.asyncio
async def test_inference_transport_timeout(settings: Settings) -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        raise httpx.TimeoutException("timeout")

    with pytest.raises(UpstreamTimeoutError) as exc:
        await _complete(settings, handler)

    assert exc.value.status_code == 408


@pytest.mark.asyncio
async def test_inference_overall_deadline_cancels_call(settings: Settings) -> None:
    cancelled = asyncio.Event()

    async def handler(_: httpx.Request) -> httpx.Response:
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.set()
            raise
        return httpx.Response(200, json="late")

    fast = settings.model_copy(update={"inference_timeout": 0.05})

    with pytest.raises(UpstreamTimeoutError):
        await _complete(fast, handler)

    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_inference_connection_error(settings: Settings) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(UpstreamUnavailableError):
        await _complete(settings, handler)


@pytest.mark.asyncio
async def test_inference_missing_key_makes_no_call(settings: Settings) -> None:
    calls: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json="unused")

    unconfigured = settings.model_copy(update={"hf_api_key": None})

    with pytest.raises(ConfigurationMissingError) as exc:
        await _complete(unconfigured, handler)

    assert calls == []
    assert exc.value.status_code == 500
    assert exc.value.message == "Service temporarily unavailable"
