"""
WechatMP — REST client facade.
"""

from typing import Optional

import httpx

from wxmp.cache import TokenCache
from wxmp.config import Config
from wxmp.menu import MenuAPI
from wxmp.transport.http import HttpClient


class WechatMP:
    """Async client for the platform REST API."""

    def __init__(
        self,
        config: Config,
        cache: Optional[TokenCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.http = HttpClient(
            app_id=config.app_id,
            app_secret=config.app_secret,
            base_url=config.api_base_url,
            cache=cache,
            transport=transport,
        )
        self.menu = MenuAPI(self.http)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "WechatMP":
        return self

    async def __aexit__(self, *_exc: object) -> None:
        await self.close()
