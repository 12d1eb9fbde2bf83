import pytest

from toshoquery.config.settings import settings
from toshoquery.utils.http_client import HTTPClient


@pytest.mark.asyncio
async def test_client_is_created_lazily_and_closed() -> None:
    client = HTTPClient()

    first = await client.get_client()
    second = await client.get_client()

    assert first is second
    assert first.headers["User-Agent"] == settings.USER_AGENT

    await client.close()

    assert first.is_closed
    assert client._client is None


@pytest.mark.asyncio
async def test_zero_timeout_disables_timeout(monkeypatch) -> None:
    monkeypatch.setattr(settings, "HTTP_TIMEOUT", 0)
    client = HTTPClient()

    httpx_client = await client.get_client()

    assert httpx_client.timeout.read is None
    await client.close()
