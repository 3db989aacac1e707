"""
HTTP transport for the Apillon API.

This module provides the ApillonClient class, the single transport shared by
the storage core and every resource wrapper. It owns one aiohttp session,
attaches the API key to API calls, enforces per-call timeouts and turns
network failures and error statuses into TransportError. It never retries.
"""

import asyncio
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote

import aiohttp
import structlog
from pydantic import BaseModel, Field, field_validator

from .errors import TransportError


logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.apillon.io"


def api_path(*segments: str) -> str:
    """Join path segments, percent-encoding each one."""
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


class ClientConfig(BaseModel):
    """Configuration for an Apillon API client."""

    api_key: str = Field(..., min_length=1)
    base_url: str = DEFAULT_BASE_URL

    # Per-call timeouts in seconds
    get_timeout: float = Field(default=30.0, gt=0)
    post_timeout: float = Field(default=60.0, gt=0)
    delete_timeout: float = Field(default=30.0, gt=0)
    upload_timeout: float = Field(default=300.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")


class ApillonClient:
    """Authenticated async transport for the Apillon REST API."""

    def __init__(self, config: ClientConfig, session: Optional[aiohttp.ClientSession] = None):
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "ApillonClient":
        """Async context manager entry."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def initialize(self) -> None:
        """Create the shared HTTP session if none is open."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
            self._owns_session = True
            logger.info("Created HTTP session", base_url=self.config.base_url)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self.session and self._owns_session and not self.session.closed:
            await self.session.close()
        if self._owns_session:
            self.session = None

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Basic {self.config.api_key}"}

    def _url(self, path: str) -> str:
        return f"{self.config.base_url}/{path.lstrip('/')}"

    async def _session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            await self.initialize()
        assert self.session is not None  # nosec
        return self.session

    async def _request(
        self,
        method: str,
        path: str,
        timeout: float,
        params: Optional[Mapping[str, str]] = None,
        payload: Optional[Any] = None,
    ) -> str:
        """Send an authenticated API request and return the response text."""
        session = await self._session()
        url = self._url(path)
        headers = self._auth_headers()
        kwargs: Dict[str, Any] = {
            "headers": headers,
            "timeout": aiohttp.ClientTimeout(total=timeout),
        }
        if params:
            kwargs["params"] = dict(params)
        if payload is not None:
            kwargs["json"] = payload

        logger.debug("Sending API request", method=method, path=path)

        try:
            async with session.request(method, url, **kwargs) as response:
                body = await response.text(errors="replace")
                if response.status >= 400:
                    logger.error("API request failed", method=method, path=path, status=response.status, body=body)
                    raise TransportError(
                        f"{method} {path} failed with status {response.status}",
                        status_code=response.status,
                        body=body,
                    )
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("API request error", method=method, path=path, error=str(e), error_type=type(e).__name__)
            raise TransportError(f"{method} {path} failed: {e}", original_exception=e) from e

    async def get(self, path: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Send an authenticated GET request."""
        return await self._request("GET", path, self.config.get_timeout, params=params)

    async def post(self, path: str, payload: Optional[Any] = None) -> str:
        """Send an authenticated POST request with an optional JSON body."""
        return await self._request("POST", path, self.config.post_timeout, payload=payload)

    async def delete(self, path: str) -> str:
        """Send an authenticated DELETE request."""
        return await self._request("DELETE", path, self.config.delete_timeout)

    async def put_signed(self, url: str, body: Union[bytes, str]) -> Tuple[int, str]:
        """
        PUT raw content to a pre-signed URL.

        The URL carries its own authorization, so no Authorization header is
        sent. The status is returned as-is for the caller to judge; only
        network failures raise.
        """
        session = await self._session()
        data = body.encode("utf-8") if isinstance(body, str) else body

        try:
            async with session.put(
                url,
                data=data,
                skip_auto_headers=("Content-Type",),
                timeout=aiohttp.ClientTimeout(total=self.config.upload_timeout),
            ) as response:
                return response.status, await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Signed URL upload error", error=str(e), error_type=type(e).__name__)
            raise TransportError(f"PUT to signed URL failed: {e}", original_exception=e) from e
