"""
Website hosting: websites, upload sessions, deployments and short URLs.
"""

from typing import Any, Mapping

from apillon.models.common import ApiResponse

from .base import BaseResource


class Hosting(BaseResource):
    """Hosting websites collection."""

    collection = ("hosting",)

    async def list_websites(self) -> ApiResponse[Any]:
        """Retrieve all websites."""
        return await self._get("websites")

    async def create_website(self, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Create a new website."""
        return await self._post("websites", body=self._require_body(body))

    async def get_website(self, website_uuid: str) -> ApiResponse[Any]:
        """Return details for a website."""
        return await self._get("websites", self._require(website_uuid, "website_uuid"))

    async def start_upload(self, website_uuid: str, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Start an upload session for a website."""
        self._require(website_uuid, "website_uuid")
        return await self._post("websites", website_uuid, "upload", body=self._require_body(body))

    async def end_upload(self, website_uuid: str, session_uuid: str) -> ApiResponse[Any]:
        """End an upload session for a website."""
        self._require(website_uuid, "website_uuid")
        self._require(session_uuid, "session_uuid")
        return await self._post("websites", website_uuid, "upload", session_uuid, "end")

    async def deploy_website(self, website_uuid: str, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Trigger a deployment of the website."""
        self._require(website_uuid, "website_uuid")
        return await self._post("websites", website_uuid, "deploy", body=self._require_body(body))

    async def list_deployments(self, website_uuid: str) -> ApiResponse[Any]:
        """List deployments of a website."""
        return await self._get("websites", self._require(website_uuid, "website_uuid"), "deployments")

    async def get_deployment(self, website_uuid: str, deployment_uuid: str) -> ApiResponse[Any]:
        """Return details of a website deployment."""
        self._require(website_uuid, "website_uuid")
        self._require(deployment_uuid, "deployment_uuid")
        return await self._get("websites", website_uuid, "deployments", deployment_uuid)

    async def create_short_url(self, body: Mapping[str, Any]) -> ApiResponse[Any]:
        """Create a short URL."""
        return await self._post("short-url", body=self._require_body(body))
