import httpx
import pytest

from notionify.config import Settings
from notionify.services.health_service import HealthService


@pytest.mark.asyncio
async def test_dependencies_report_each_upstream(settings: Settings) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/zen":
            return httpx.Response(200, text="Keep it logically awesome.")
        return httpx.Response(503)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await HealthService(client, settings).check_dependencies()

    assert result == {"hugging_face": False, "github": True}


@pytest.mark.asyncio
async def test_unreachable_upstream_is_reported_down(settings: Settings) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await HealthService(client, settings).check_dependencies()

    assert result == {"hugging_face": False, "github": False}
