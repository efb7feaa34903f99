"""
Integration tests against the real platform API.

Requires environment variables:
  WXMP_APP_ID       — app id of a test account
  WXMP_APP_SECRET   — app secret

Run: WXMP_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from wxmp import Config, WechatMP

SKIP = not os.environ.get("WXMP_INTEGRATION")

pytestmark = pytest.mark.skipif(SKIP, reason="WXMP_INTEGRATION not set")


class TestAccessToken:
    @pytest.mark.asyncio
    async def test_fetch_token(self):
        async with WechatMP(Config.from_env()) as client:
            token = await client.http.get_token()
            assert token
            assert await client.http.get_token() == token


class TestMenu:
    @pytest.mark.asyncio
    async def test_create_and_get(self):
        menu = {"button": [{"type": "click", "name": "开始", "key": "Start"}]}
        async with WechatMP(Config.from_env()) as client:
            await client.menu.create(menu)
            current = await client.menu.get()
            assert current["menu"]["button"][0]["key"] == "Start"
