"""
Computing contracts.
"""

from typing import Any, Mapping

from apillon.models.common import ApiResponse

from .base import BaseResource


class Computing(BaseResource):
    """Computing contracts collection."""

    collection = ("computing", "contracts")

    async def create_contract(self, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Create a new computing contract."""
        return await self._post(body=self._require_body(body))

    async def list_contracts(self) -> ApiResponse[Any]:
        """List computing contracts."""
        return await self._get()

    async def get_contract(self, contract_uuid: str) -> ApiResponse[Any]:
        """Return details of a contract."""
        return await self._get(self._require(contract_uuid, "contract_uuid"))

    async def list_transactions(self, contract_uuid: str) -> ApiResponse[Any]:
        """List contract transactions."""
        return await self._get(self._require(contract_uuid, "contract_uuid"), "transactions")

    async def transfer_ownership(self, contract_uuid: str, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Transfer contract ownership to another account."""
        self._require(contract_uuid, "contract_uuid")
        return await self._post(contract_uuid, "transfer-ownership", body=self._require_body(body))

    async def encrypt(self, contract_uuid: str, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Encrypt content with the contract's key."""
        self._require(contract_uuid, "contract_uuid")
        return await self._post(contract_uuid, "encrypt", body=self._require_body(body))

    async def assign_cid_to_nft(self, contract_uuid: str, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Assign an encrypted file's CID to an NFT."""
        self._require(contract_uuid, "contract_uuid")
        return await self._post(contract_uuid, "assign-cid-to-nft", body=self._require_body(body))
