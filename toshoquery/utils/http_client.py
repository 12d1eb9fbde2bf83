from typing import Optional

import httpx

from toshoquery.config.settings import settings
from toshoquery.utils.logger import http_logger

# ===========================
# Shared HTTP Client
# ===========================
class HTTPClient:

    def __init__(self):
        self._client: Optional[httpx.AsyncClient] = None

    async def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            # 0 or unset disables the timeout entirely
            timeout = float(settings.HTTP_TIMEOUT) if settings.HTTP_TIMEOUT else None
            client_args = {
                "timeout": httpx.Timeout(timeout),
                "follow_redirects": True,
                "headers": {"User-Agent": settings.USER_AGENT}
            }
            if settings.PROXY_URL:
                client_args["proxy"] = settings.PROXY_URL
            self._client = httpx.AsyncClient(**client_args)
            http_logger.debug("HTTP client created")
        return self._client

    async def get(self, url: str, **kwargs) -> httpx.Response:
        client = await self.get_client()
        return await client.get(url, **kwargs)

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
            http_logger.debug("HTTP client closed")

# ===========================
# Process-wide HTTP Client Instance
# ===========================
http_client = HTTPClient()
