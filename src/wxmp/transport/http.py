"""
REST client for the platform API.

Every call carries an ``access_token`` query parameter, fetched with the
app credentials on a cache miss.
"""

import json
import logging
from typing import Any, Optional, Union

import httpx

from wxmp.cache import SimpleCache, TokenCache
from wxmp.config import DEFAULT_API_BASE_URL
from wxmp.errors import ApiError

logger = logging.getLogger(__name__)

# errcodes meaning the cached token is no longer accepted
TOKEN_EXPIRED_CODES = {40001, 40014, 42001}


class HttpClient:
    def __init__(
        self,
        app_id: str,
        app_secret: str,
        base_url: str = DEFAULT_API_BASE_URL,
        cache: Optional[TokenCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._app_id = app_id
        self._app_secret = app_secret
        self._base_url = base_url.rstrip("/")
        self._cache: TokenCache = cache if cache is not None else SimpleCache()
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": "wxmp/0.1.0", "Accept": "application/json"},
            timeout=30.0,
            transport=transport,
        )

    @staticmethod
    def _check(resp: httpx.Response) -> Any:
        if resp.status_code >= 400:
            raise ApiError(f"HTTP {resp.status_code}: {resp.text[:200]}")
        try:
            data = resp.json()
        except json.JSONDecodeError:
            raise ApiError(f"Invalid JSON response: {resp.text[:200]}")
        if isinstance(data, dict) and data.get("errcode"):
            logger.error("API error %s: %s", data["errcode"], data.get("errmsg"))
            raise ApiError(
                f"API error {data['errcode']}: {data.get('errmsg', '')}",
                errcode=data["errcode"],
                errmsg=data.get("errmsg"),
            )
        return data

    async def get_token(self) -> str:
        cached = self._cache.get()
        if cached:
            return cached
        resp = await self._client.get("/token", params={
            "grant_type": "client_credential",
            "appid": self._app_id,
            "secret": self._app_secret,
        })
        data = self._check(resp)
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise ApiError(f"No access_token in response: {resp.text[:200]}")
        logger.info("Fetched access token %s...", token[:8])
        self._cache.set(token, int(data.get("expires_in", 7200)))
        return token

    async def _request(self, method: str, path: str, content: Optional[bytes] = None) -> Any:
        for attempt in range(2):
            token = await self.get_token()
            resp = await self._client.request(
                method, path, params={"access_token": token}, content=content,
                headers={"Content-Type": "application/json"} if content is not None else None,
            )
            try:
                return self._check(resp)
            except ApiError as e:
                if attempt == 0 and e.errcode in TOKEN_EXPIRED_CODES:
                    logger.info("Access token rejected (%s), refreshing", e.errcode)
                    self._cache.clear()
                    continue
                raise

    async def get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def post(self, path: str, body: Optional[Union[dict[str, Any], str]] = None) -> Any:
        if body is None:
            content = b"{}"
        elif isinstance(body, str):
            content = body.encode("utf-8")
        else:
            # The platform expects raw UTF-8, not \u escapes
            content = json.dumps(body, ensure_ascii=False).encode("utf-8")
        return await self._request("POST", path, content)

    async def close(self) -> None:
        await self._client.aclose()
