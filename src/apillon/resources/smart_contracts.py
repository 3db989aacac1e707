"""
Smart contract templates and deployed contracts.
"""

from typing import Any, Mapping

from apillon.models.common import ApiResponse

from .base import BaseResource


class SmartContracts(BaseResource):
    """Contract templates plus the contracts deployed from them."""

    collection = ("contracts",)

    async def list_contracts(self) -> ApiResponse[Any]:
        """List available contract templates."""
        return await self._get()

    async def get_contract(self, contract_uuid: str) -> ApiResponse[Any]:
        return await self._get(self._require(contract_uuid, "contract_uuid"))

    async def get_contract_abi(self, contract_uuid: str) -> ApiResponse[Any]:
        return await self._get(self._require(contract_uuid, "contract_uuid"), "abi")

    async def deploy_contract(self, contract_uuid: str, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Deploy a contract template with constructor arguments in `body`."""
        self._require(contract_uuid, "contract_uuid")
        return await self._post(contract_uuid, "deploy", body=self._require_body(body))

    async def list_deployed_contracts(self) -> ApiResponse[Any]:
        return await self._get("deployed")

    async def get_deployed_contract(self, contract_uuid: str) -> ApiResponse[Any]:
        return await self._get("deployed", self._require(contract_uuid, "contract_uuid"))

    async def call_deployed_contract(self, contract_uuid: str, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Execute a method call on a deployed contract."""
        self._require(contract_uuid, "contract_uuid")
        return await self._post("deployed", contract_uuid, "call", body=self._require_body(body))

    async def get_deployed_contract_abi(self, contract_uuid: str) -> ApiResponse[Any]:
        return await self._get("deployed", self._require(contract_uuid, "contract_uuid"), "abi")

    async def delete_deployed_contract(self, contract_uuid: str) -> ApiResponse[Any]:
        return await self._delete("deployed", self._require(contract_uuid, "contract_uuid"))

    async def list_deployed_transactions(self, contract_uuid: str) -> ApiResponse[Any]:
        return await self._get("deployed", self._require(contract_uuid, "contract_uuid"), "transactions")
