"""
Custom menu REST API.
"""

from __future__ import annotations

from typing import Any, Union

from wxmp.transport.http import HttpClient


class MenuAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def create(self, menu: Union[dict[str, Any], str]) -> dict[str, Any]:
        """Create or replace the menu. Accepts a dict or a JSON string."""
        return await self._http.post("/menu/create", menu)

    async def get(self) -> dict[str, Any]:
        return await self._http.get("/menu/get")

    async def delete(self) -> dict[str, Any]:
        return await self._http.get("/menu/delete")
