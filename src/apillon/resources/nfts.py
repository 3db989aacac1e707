"""
NFT collections.
"""

from typing import Any, Mapping

from apillon.models.common import ApiResponse

from .base import BaseResource


class Nfts(BaseResource):
    """NFT collections on Substrate, EVM and Unique chains."""

    collection = ("nfts", "collections")

    async def list_collections(self) -> ApiResponse[Any]:
        return await self._get()

    async def get_collection(self, collection_uuid: str) -> ApiResponse[Any]:
        return await self._get(self._require(collection_uuid, "collection_uuid"))

    async def list_transactions(self, collection_uuid: str) -> ApiResponse[Any]:
        return await self._get(self._require(collection_uuid, "collection_uuid"), "transactions")

    async def create_substrate_collection(self, body: Mapping[str, Any]) -> ApiResponse[Any]:
        return await self._post("substrate", body=self._require_body(body))

    async def create_evm_collection(self, body: Mapping[str, Any]) -> ApiResponse[Any]:
        return await self._post("evm", body=self._require_body(body))

    async def create_unique_collection(self, body: Mapping[str, Any]) -> ApiResponse[Any]:
        return await self._post("unique", body=self._require_body(body))
