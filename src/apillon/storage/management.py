"""
Storage bucket management.
"""

from typing import Optional

import structlog

from apillon.core.client import ApillonClient, api_path
from apillon.core.errors import ApillonError
from apillon.models.common import ApiResponse
from apillon.models.storage import BucketItem, IPFSClusterInfoResponse, ListBucketsResponse
from apillon.utils.validators import decode_response, require

logger = structlog.get_logger(__name__)


class BucketManager:
    """Creates and looks up storage buckets."""

    def __init__(self, client: ApillonClient):
        self.client = client

    async def create_bucket(self, name: str, description: Optional[str] = None) -> ApiResponse[BucketItem]:
        """Create a bucket with an optional description."""
        require(name, "name")
        payload = {"name": name}
        if description:
            payload["description"] = description

        try:
            raw = await self.client.post(api_path("storage", "buckets"), payload)
            response = decode_response(raw, ApiResponse[BucketItem], "create bucket")
        except ApillonError as e:
            logger.error("Failed to create bucket", name=name, error=str(e))
            raise

        logger.info("Bucket created", name=name, bucket_uuid=response.data.bucket_uuid)
        return response

    async def list_buckets(self, name: Optional[str] = None) -> ListBucketsResponse:
        """List buckets, optionally filtered by name."""
        params = {"name": name} if name else None
        raw = await self.client.get(api_path("storage", "buckets"), params)
        response = decode_response(raw, ListBucketsResponse, "list buckets")
        logger.info("Buckets listed", name=name, total=response.data.total)
        return response

    async def find_bucket(self, name: str) -> Optional[BucketItem]:
        """Return the bucket whose name matches exactly, if any."""
        require(name, "name")
        response = await self.list_buckets(name)
        for bucket in response.data.items:
            if bucket.name == name:
                return bucket
        return None

    async def get_ipfs_cluster_info(self) -> IPFSClusterInfoResponse:
        """Get the project's IPFS cluster gateways."""
        raw = await self.client.get(api_path("storage", "ipfs-cluster-info"))
        return decode_response(raw, IPFSClusterInfoResponse, "IPFS cluster info")
