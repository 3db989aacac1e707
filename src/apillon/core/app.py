"""
Top-level SDK entry point bundling every Apillon API module over one client.
"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Optional

import structlog

from apillon.core.client import ApillonClient, ClientConfig
from apillon.models.storage import UploadItem, UploadResult
from apillon.resources import Computing, Hosting, Nfts, SmartContracts, Social
from apillon.storage import BucketManager, FileManager, UploadOrchestrator
from apillon.storage.uploading import DEFAULT_SETTLE_DELAY, ProgressCallback

logger = structlog.get_logger(__name__)


class Apillon:
    """Apillon API client with one attribute per resource collection."""

    def __init__(
        self,
        config: ClientConfig,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        client: Optional[ApillonClient] = None,
    ) -> None:
        """
        Initialize the SDK.

        Args:
            config: Explicit client configuration, including the API key
            settle_delay: Seconds to wait between upload negotiation and transfer
            sleep: Awaitable used for the settle delay
            client: Transport to use instead of building one from `config`
        """
        self.client = client or ApillonClient(config)

        # Storage
        self.buckets = BucketManager(self.client)
        self.files = FileManager(self.client)
        self.uploads = UploadOrchestrator(self.client, settle_delay=settle_delay, sleep=sleep)

        # Other resources
        self.hosting = Hosting(self.client)
        self.nfts = Nfts(self.client)
        self.computing = Computing(self.client)
        self.contracts = SmartContracts(self.client)
        self.social = Social(self.client)

    async def __aenter__(self) -> "Apillon":
        await self.client.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def upload_files(
        self,
        bucket_uuid: str,
        batch: Sequence[UploadItem],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> UploadResult:
        """Upload a batch of files to a bucket through one upload session."""
        return await self.uploads.upload_batch(bucket_uuid, batch, progress_callback=progress_callback)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
        logger.info("Apillon client closed")
