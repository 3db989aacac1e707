"""
Social hubs and channels.
"""

from typing import Any, Mapping

from apillon.models.common import ApiResponse

from .base import BaseResource


class Social(BaseResource):
    """Social hubs and their channels."""

    collection = ("social",)

    async def list_channels(self) -> ApiResponse[Any]:
        return await self._get("channels")

    async def get_channel(self, channel_uuid: str) -> ApiResponse[Any]:
        return await self._get("channels", self._require(channel_uuid, "channel_uuid"))

    async def create_channel(self, body: Mapping[str, Any]) -> ApiResponse[Any]:
        return await self._post("channels", body=self._require_body(body))

    async def list_hubs(self) -> ApiResponse[Any]:
        return await self._get("hubs")

    async def get_hub(self, hub_uuid: str) -> ApiResponse[Any]:
        return await self._get("hubs", self._require(hub_uuid, "hub_uuid"))

    async def create_hub(self, body: Mapping[str, Any]) -> ApiResponse[Any]:
        return await self._post("hubs", body=self._require_body(body))
