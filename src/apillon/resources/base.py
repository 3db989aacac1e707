"""
Base class for Apillon resource collections.

Every resource wrapper validates its identifiers and body, calls one endpoint
through the shared client and decodes the standard response envelope.
"""

from typing import Any, Mapping, Optional

import structlog

from apillon.core.client import ApillonClient, api_path
from apillon.models.common import ApiResponse
from apillon.utils.validators import decode_response, require, require_body


class BaseResource:
    """Base class for a remote resource collection."""

    # Leading path segments of the collection, e.g. ("hosting", "websites")
    collection: tuple = ()

    def __init__(self, client: ApillonClient) -> None:
        self.client = client
        self.logger = structlog.get_logger(self.__class__.__module__).bind(resource=self.__class__.__name__)

    def _path(self, *segments: str) -> str:
        return api_path(*self.collection, *segments)

    async def _get(self, *segments: str, params: Optional[Mapping[str, str]] = None) -> ApiResponse[Any]:
        path = self._path(*segments)
        raw = await self.client.get(path, params)
        return decode_response(raw, ApiResponse[Any], f"GET {path}")

    async def _post(self, *segments: str, body: Optional[Mapping[str, Any]] = None) -> ApiResponse[Any]:
        path = self._path(*segments)
        raw = await self.client.post(path, dict(body) if body is not None else None)
        response = decode_response(raw, ApiResponse[Any], f"POST {path}")
        self.logger.info("Resource request completed", method="POST", path=path)
        return response

    async def _delete(self, *segments: str) -> ApiResponse[Any]:
        path = self._path(*segments)
        raw = await self.client.delete(path)
        response = decode_response(raw, ApiResponse[Any], f"DELETE {path}")
        self.logger.info("Resource request completed", method="DELETE", path=path)
        return response

    @staticmethod
    def _require(value: Optional[str], field: str = "uuid") -> str:
        return require(value, field)

    @staticmethod
    def _require_body(body: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
        return require_body(body)
