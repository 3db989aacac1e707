"""
Files stored in buckets: listing, details, deletion and IPFS links.
"""

from typing import Any

import structlog

from apillon.core.client import ApillonClient, api_path
from apillon.core.errors import ApillonError, DecodeError
from apillon.models.common import ApiResponse
from apillon.models.storage import FileDetailsResponse, IPFSLinkResponse, ListFilesResponse
from apillon.utils.validators import decode_response, require

logger = structlog.get_logger(__name__)


class FileManager:
    """Reads and deletes files in a bucket."""

    def __init__(self, client: ApillonClient):
        self.client = client

    async def get_bucket_content(self, bucket_uuid: str) -> ApiResponse[Any]:
        """List directories and files at the root of a bucket."""
        require(bucket_uuid, "bucket_uuid")
        raw = await self.client.get(api_path("storage", "buckets", bucket_uuid, "content"))
        return decode_response(raw, ApiResponse[Any], "bucket content")

    async def list_files(self, bucket_uuid: str) -> ListFilesResponse:
        """List every file in a bucket."""
        require(bucket_uuid, "bucket_uuid")
        try:
            raw = await self.client.get(api_path("storage", "buckets", bucket_uuid, "files"))
            response = decode_response(raw, ListFilesResponse, "list files")
        except ApillonError as e:
            logger.error("Failed to list files", bucket_uuid=bucket_uuid, error=str(e))
            raise

        logger.info("Files listed", bucket_uuid=bucket_uuid, total=response.data.total)
        return response

    async def get_file_details(self, bucket_uuid: str, file_uuid: str) -> FileDetailsResponse:
        """Get details of one file, including its CID once processed."""
        require(bucket_uuid, "bucket_uuid")
        require(file_uuid, "file_uuid")
        raw = await self.client.get(api_path("storage", "buckets", bucket_uuid, "files", file_uuid))
        return decode_response(raw, FileDetailsResponse, "file details")

    async def delete_file(self, bucket_uuid: str, file_uuid: str) -> ApiResponse[Any]:
        """Mark a file for deletion."""
        require(bucket_uuid, "bucket_uuid")
        require(file_uuid, "file_uuid")
        raw = await self.client.delete(api_path("storage", "buckets", bucket_uuid, "files", file_uuid))
        response = decode_response(raw, ApiResponse[Any], "delete file")
        logger.info("File deleted", bucket_uuid=bucket_uuid, file_uuid=file_uuid)
        return response

    async def get_ipfs_link(self, cid: str) -> str:
        """
        Get or generate an IPFS gateway link for a CID.

        Raises:
            InvalidInputError: If the CID is empty
            DecodeError: If the response carries no link
        """
        require(cid, "cid")
        raw = await self.client.get(api_path("storage", "link-on-ipfs", cid))
        response = decode_response(raw, IPFSLinkResponse, "IPFS link")

        if not response.data.link:
            raise DecodeError(f"no IPFS link found for CID {cid}", raw_body=raw)

        logger.info("IPFS link resolved", cid=cid)
        return response.data.link
